import httpx
import pytest

from article_cloud.application.errors import ExtractionError
from article_cloud.application.services.web_loader import WebLoaderService

ARTICLE_HTML = """
<html>
  <head><title>Java</title><style>.x { color: red }</style></head>
  <body>
    <nav>Main menu Donate Log in</nav>
    <div id="bodyContent">
      <p>Java is a   high-level,
         class-based language.</p>
      <script>var tracking = true;</script>
      <p>It was designed by James Gosling.</p>
    </div>
    <footer>Privacy policy</footer>
  </body>
</html>
"""


def loader_for(handler, **kwargs):
    return WebLoaderService(transport=httpx.MockTransport(handler), **kwargs)


def test_fetch_extracts_selected_region():
    seen = {}

    def handler(request):
        seen["ua"] = request.headers["user-agent"]
        return httpx.Response(200, html=ARTICLE_HTML)

    text = loader_for(handler, user_agent="tests/1.0").fetch("https://en.wikipedia.org/wiki/Java")

    assert text == "Java is a high-level, class-based language. It was designed by James Gosling."
    assert seen["ua"] == "tests/1.0"


def test_fetch_ignores_content_outside_region():
    text = loader_for(lambda r: httpx.Response(200, html=ARTICLE_HTML)).fetch("https://example.org/a")
    assert "menu" not in text
    assert "Privacy" not in text
    assert "tracking" not in text


def test_custom_selector():
    html = "<html><body><article class='post'>Hello cloud</article><div>noise</div></body></html>"
    loader = loader_for(lambda r: httpx.Response(200, html=html), content_selector="article.post")
    assert loader.fetch("https://example.org/post") == "Hello cloud"


def test_follows_redirects():
    def handler(request):
        if request.url.path == "/old":
            return httpx.Response(301, headers={"Location": "https://example.org/new"})
        return httpx.Response(200, html=ARTICLE_HTML)

    assert loader_for(handler).fetch("https://example.org/old").startswith("Java is")


def test_http_error_status_raises():
    loader = loader_for(lambda r: httpx.Response(404, text="missing"))
    with pytest.raises(httpx.HTTPStatusError):
        loader.fetch("https://example.org/missing")


def test_network_error_propagates():
    def handler(request):
        raise httpx.ConnectError("connection refused", request=request)

    with pytest.raises(httpx.HTTPError):
        loader_for(handler).fetch("https://example.org/down")


def test_empty_page_raises_extraction_error():
    loader = loader_for(lambda r: httpx.Response(200, html="<html><body></body></html>"))
    with pytest.raises(ExtractionError) as exc:
        loader.fetch("https://example.org/empty")
    assert exc.value.url == "https://example.org/empty"


def test_inline_markup_does_not_split_words():
    html = "<div id='bodyContent'><p><b>Ja</b>va and <a href='/x'>program</a>ming</p></div>"
    loader = loader_for(lambda r: httpx.Response(200, html=html))
    assert loader.fetch("https://example.org/inline") == "Java and programming"


def test_block_elements_separate_words():
    html = (
        "<div id='bodyContent'><h2>Syntax</h2><ul><li>classes</li><li>objects</li></ul>"
        "<p>one<br>two</p><table><tr><td>cell</td><td>data</td></tr></table></div>"
    )
    loader = loader_for(lambda r: httpx.Response(200, html=html))
    assert loader.fetch("https://example.org/blocks") == "Syntax classes objects one two cell data"
