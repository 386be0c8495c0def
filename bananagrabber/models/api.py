"""
Pydantic models for Reddit's post permalink JSON.

A permalink (``https://www.reddit.com/r/<sub>/comments/<id>/<slug>/.json``)
returns a JSON array of two listings: the first wraps the post itself, the
second the comment tree. Every object carries a ``kind`` tag and a ``data``
payload; the tag selects the model below and unknown tags are rejected.
"""

from typing import Annotated, List, Literal, Optional, Union

from pydantic import BaseModel, Field, RootModel, ValidationError

from bananagrabber.errors import DecodeError, UnexpectedShape


class RedditVideo(BaseModel):
    """Video hosted on v.redd.it."""
    scrubber_media_url: str
    fallback_url: str  # directly playable, still carries a signed query string
    duration: float
    is_gif: bool


class OEmbed(BaseModel):
    """Embed metadata for third-party hosts; only its presence matters."""


class RedditMedia(BaseModel):
    """The ``media`` / ``secure_media`` object of a post."""
    reddit_video: Optional[RedditVideo] = None
    oembed: Optional[OEmbed] = None


class PostInfo(BaseModel):
    """The subset of a ``t3`` payload the classifier reads."""
    subreddit: str
    title: str
    is_reddit_media_domain: bool
    is_video: bool
    over_18: bool
    domain: str
    url: str
    media: Optional[RedditMedia] = None
    secure_media: Optional[RedditMedia] = None


class CommentInfo(BaseModel):
    """Comment payload; nothing is consumed."""


class MoreInfo(BaseModel):
    """Placeholder for the "load more comments" stub; nothing is consumed."""


class ApiListing(BaseModel):
    children: List["ApiObject"]


class ListingObject(BaseModel):
    kind: Literal["Listing"]
    data: ApiListing


class PostObject(BaseModel):
    kind: Literal["t3"]
    data: PostInfo


class CommentObject(BaseModel):
    kind: Literal["t1"]
    data: CommentInfo


class MoreObject(BaseModel):
    kind: Literal["more"]
    data: MoreInfo


ApiObject = Annotated[
    Union[ListingObject, PostObject, CommentObject, MoreObject],
    Field(discriminator="kind"),
]

ApiListing.model_rebuild()
ListingObject.model_rebuild()


class ApiResponse(RootModel[List[ApiObject]]):
    """Top-level permalink response."""

    def __getitem__(self, index: int):
        return self.root[index]

    def __len__(self) -> int:
        return len(self.root)


_VARIANT_NAMES = {
    ListingObject: "listing",
    PostObject: "post",
    CommentObject: "comment",
    MoreObject: "more",
}


def _describe_validation_error(exc: ValidationError, limit: int = 3) -> str:
    problems = []
    for err in exc.errors()[:limit]:
        location = ".".join(str(part) for part in err["loc"]) or "<root>"
        problems.append(f"{location}: {err['msg']}")
    if exc.error_count() > limit:
        problems.append(f"... and {exc.error_count() - limit} more")
    return "; ".join(problems)


def decode_api_response(raw: Union[bytes, str]) -> ApiResponse:
    """
    Decode a permalink response body.

    Args:
        raw: JSON document as returned by Reddit

    Returns:
        The decoded response

    Raises:
        DecodeError: If the document is not JSON or does not match the
            listing/post/comment structure
    """
    try:
        return ApiResponse.model_validate_json(raw)
    except ValidationError as e:
        raise DecodeError(_describe_validation_error(e), expected="reddit api response") from e


def get_post_from_response(resp: ApiResponse) -> PostInfo:
    """
    Extract the post from a decoded permalink response.

    Reddit always puts a single-post listing first; anything else means the
    URL was not a post permalink.

    Raises:
        UnexpectedShape: If the first element is not a listing whose first
            child is a post
    """
    expected = "listing→post"
    if len(resp) == 0:
        raise UnexpectedShape(expected=expected, got="empty response")

    first = resp[0]
    if not isinstance(first, ListingObject):
        raise UnexpectedShape(expected=expected, got=_VARIANT_NAMES[type(first)])

    children = first.data.children
    if not children:
        raise UnexpectedShape(expected=expected, got="listing→empty")

    child = children[0]
    if not isinstance(child, PostObject):
        raise UnexpectedShape(expected=expected, got=f"listing→{_VARIANT_NAMES[type(child)]}")

    return child.data
