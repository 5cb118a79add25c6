"""
Tests for the root document shell
"""
import pytest
from markupsafe import Markup

from app.core.layout import RootLayout, render_root_layout, root_layout
from app.core.metadata import SiteMetadata


@pytest.mark.asyncio
async def test_single_html_element_with_lang(parse_document):
    """Document has exactly one <html lang="en">"""
    doc = parse_document(await render_root_layout("<p>hi</p>"))

    html_tags = doc.find_all("html")
    assert len(html_tags) == 1
    assert html_tags[0].get("lang") == "en"


@pytest.mark.asyncio
async def test_single_body_element(parse_document):
    doc = parse_document(await render_root_layout("<p>hi</p>"))

    assert len(doc.find_all("body")) == 1
    assert len(doc.find_all("head")) == 1


@pytest.mark.asyncio
async def test_children_rendered_unchanged():
    """Children land verbatim as the only content of <body>"""
    children = '<div id="team"><span class="a&amp;b">Mumbai &amp; Chennai</span><script>var x = 1 < 2;</script></div>'

    html = await render_root_layout(children)

    assert f"<body>{children}</body>" in html


@pytest.mark.asyncio
async def test_markup_children_not_double_escaped():
    children = Markup("<em>{}</em>").format("<b>")

    html = await render_root_layout(children)

    assert "<body><em>&lt;b&gt;</em></body>" in html


@pytest.mark.asyncio
async def test_empty_children():
    assert "<body></body>" in await render_root_layout(None)
    assert "<body></body>" in await render_root_layout("")


@pytest.mark.asyncio
async def test_head_metadata(parse_document):
    doc = parse_document(await render_root_layout("<p>hi</p>"))

    assert doc.title == "IPL Auction"
    assert doc.meta("description") == "Build your dream IPL team through live auctions"
    assert doc.meta("viewport") == "width=device-width, initial-scale=1"
    assert [m.get("charset") for m in doc.find_all("meta") if "charset" in m] == ["utf-8"]


@pytest.mark.asyncio
async def test_global_stylesheet_linked(parse_document):
    doc = parse_document(await render_root_layout())

    links = doc.find_all("link")
    assert {"rel": "stylesheet", "href": "/static/css/globals.css"} in links


@pytest.mark.asyncio
async def test_doctype_first():
    html = await render_root_layout("x")
    assert html.lstrip().startswith("<!DOCTYPE html>")


@pytest.mark.asyncio
async def test_callable_layout_matches_render():
    children = "<section>Squad</section>"
    assert await root_layout(children) == await render_root_layout(children)


@pytest.mark.asyncio
async def test_layout_escapes_metadata(parse_document):
    layout = RootLayout(site=SiteMetadata(title="A <b> & C", description='say "hi"'))

    html = await layout.render("<p>x</p>")

    assert "<title>A &lt;b&gt; &amp; C</title>" in html
    doc = parse_document(html)
    assert doc.title == "A <b> & C"
    assert doc.meta("description") == 'say "hi"'
