"""
Value types produced by the media classifier.

``Media`` is the terminal answer of a resolution. ``MediaSource`` and
``CrossPost`` are the two verdicts the classifier can reach for a post that
is not a text post.
"""

from typing import Union

from pydantic import BaseModel


class Media(BaseModel):
    """A resolved, directly usable media URL."""
    url: str

    model_config = {"frozen": True}


class MediaSource(BaseModel):
    """The post hosts (or links straight to) its media."""
    media: Media

    model_config = {"frozen": True}


class CrossPost(BaseModel):
    """The post points at another post that must be fetched and classified."""
    url: str

    model_config = {"frozen": True}


PostMediaSource = Union[MediaSource, CrossPost]
