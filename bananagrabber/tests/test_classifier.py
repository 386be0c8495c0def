"""Tests for the media classifier."""

import pytest
from pydantic import ValidationError

from bananagrabber.core.classifier import is_short_link, scan_for_media, strip_query_params
from bananagrabber.models.api import PostInfo, RedditMedia, RedditVideo, decode_api_response, get_post_from_response
from bananagrabber.models.media import CrossPost, Media, MediaSource


def make_post(**overrides) -> PostInfo:
    fields = {
        "subreddit": "pics",
        "title": "title",
        "is_reddit_media_domain": False,
        "is_video": False,
        "over_18": False,
        "domain": "example.com",
        "url": "https://example.com/image.png",
    }
    fields.update(overrides)
    return PostInfo(**fields)


def make_video(fallback_url: str) -> RedditMedia:
    return RedditMedia(
        reddit_video=RedditVideo(
            scrubber_media_url="https://v.redd.it/abc/DASH_96",
            fallback_url=fallback_url,
            duration=10,
            is_gif=False,
        )
    )


def media(url: str) -> MediaSource:
    return MediaSource(media=Media(url=url))


@pytest.mark.parametrize(
    "name,expected",
    [
        ("empty_text", None),
        ("text", None),
        ("gfycat", media("https://gfycat.com/DistinctHonestIaerismetalmark")),
        ("imgur", media("http://i.imgur.com/wSME5Xy.gif")),
        ("ireddit", media("https://i.redd.it/kaopcso5hqw61.jpg")),
        ("jgifs", media("https://j.gifs.com/m8bLeJ.gif")),
        ("vreddit", media("https://v.redd.it/6zyfsfjjlxz11/DASH_4_8_M")),
        ("vreddit_preview", media("https://v.redd.it/u23a45f7pcd81/DASH_720.mp4")),
        ("crosspost", CrossPost(url="https://v.redd.it/dkczbt15n2r71")),
    ],
)
def test_scan_saved_responses(sample, name, expected):
    post = get_post_from_response(decode_api_response(sample(name)))
    assert scan_for_media(post) == expected


def test_reddit_video_query_is_stripped():
    post = make_post(media=make_video("https://v.redd.it/abc/DASH_480?source=x"))
    assert scan_for_media(post) == media("https://v.redd.it/abc/DASH_480")


@pytest.mark.parametrize(
    "domain,url",
    [
        ("self.AskReddit", "https://www.reddit.com/r/AskReddit/comments/abc/q/"),
        ("i.imgur.com", "https://i.imgur.com/x.gif"),
        ("v.redd.it", "https://v.redd.it/dkczbt15n2r71"),
    ],
)
def test_reddit_video_wins_over_domain_and_url(domain, url):
    post = make_post(domain=domain, url=url, media=make_video("https://v.redd.it/abc/DASH_720.mp4?source=fallback"))
    assert scan_for_media(post) == media("https://v.redd.it/abc/DASH_720.mp4")


@pytest.mark.parametrize("domain", ["self.AskReddit", "self.Jokes", "self.", "self.x.y"])
def test_self_posts_have_no_media(domain):
    post = make_post(domain=domain, url="https://v.redd.it/dkczbt15n2r71", media=RedditMedia())
    assert scan_for_media(post) is None


def test_self_prefix_must_be_at_start():
    post = make_post(domain="myself.example.com", url="https://myself.example.com/a.gif")
    assert scan_for_media(post) == media("https://myself.example.com/a.gif")


def test_oembed_media_falls_through_to_url():
    post = make_post(domain="gfycat.com", url="https://gfycat.com/Abc", media=RedditMedia(oembed={}))
    assert scan_for_media(post) == media("https://gfycat.com/Abc")


@pytest.mark.parametrize("url", ["https://v.redd.it/dkczbt15n2r71", "https://v.redd.it/a", "https://v.redd.it/ABC123xyz"])
def test_short_links_are_cross_posts(url):
    post = make_post(domain="v.redd.it", url=url)
    assert scan_for_media(post) == CrossPost(url=url)


@pytest.mark.parametrize(
    "url",
    [
        "https://v.redd.it/dkczbt15n2r71/DASH_720.mp4",
        "https://v.redd.it/dkczbt15n2r71/",
        "https://v.redd.it/dkczbt15n2r71?source=fallback",
        "http://v.redd.it/dkczbt15n2r71",
        "https://v.redd.it/",
        "https://v.redd.it/dkczbt15n2r71\n",
    ],
)
def test_other_vreddit_urls_are_media(url):
    post = make_post(domain="v.redd.it", url=url)
    assert scan_for_media(post) == media(url)


def test_scan_is_deterministic(sample):
    post = get_post_from_response(decode_api_response(sample("crosspost")))
    results = {repr(scan_for_media(post)) for _ in range(5)}
    assert len(results) == 1


def test_is_short_link():
    assert is_short_link("https://v.redd.it/dkczbt15n2r71")
    assert not is_short_link("https://www.reddit.com/r/gifs/comments/abc/x/")
    assert not is_short_link("https://v.redd.it/dkczbt15n2r71/.json")


@pytest.mark.parametrize(
    "url,expected",
    [
        ("https://v.redd.it/abc/DASH_480?source=x", "https://v.redd.it/abc/DASH_480"),
        ("https://v.redd.it/abc/DASH_480?a=1&b=2", "https://v.redd.it/abc/DASH_480"),
        ("https://v.redd.it/abc/DASH_480?", "https://v.redd.it/abc/DASH_480"),
        ("https://v.redd.it/abc/DASH_480", "https://v.redd.it/abc/DASH_480"),
    ],
)
def test_strip_query_params(url, expected):
    assert strip_query_params(url) == expected


def test_media_is_a_value():
    assert Media(url="https://x/y.gif") == Media(url="https://x/y.gif")
    with pytest.raises(ValidationError):
        Media(url="https://x/y.gif").url = "https://other"
