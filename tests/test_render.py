from toolcatalog.client.render import (
    render_detail,
    render_markdown,
    render_rich_text,
    sanitize,
    split_tags,
)


def test_sanitize_strips_script_vectors():
    dirty = (
        '<p onclick="steal()">Olá <b>mundo</b></p>'
        "<script>alert(1)</script>"
        '<img src="x.png" onerror="alert(2)">'
        '<a href="javascript:alert(3)">link</a>'
    )
    clean = sanitize(dirty)
    assert "<b>mundo</b>" in clean
    assert "<script" not in clean
    assert "alert(1)" not in clean
    assert "onerror" not in clean
    assert "onclick" not in clean
    assert "javascript:" not in clean


def test_markdown_is_rendered_and_sanitized():
    html = render_markdown("# Título\n\n<script>alert(1)</script>\n\n*ok*")
    assert "<h1>Título</h1>" in html
    assert "<em>ok</em>" in html
    assert "<script" not in html


def test_html_preferred_over_markdown():
    assert render_rich_text("<p>html</p>", "# md") == "<p>html</p>"
    assert "<h1>md</h1>" in render_rich_text(None, "# md")
    assert render_rich_text("", "") is None


def test_split_tags():
    assert split_tags(" crédito, agro ,, risco ") == ["crédito", "agro", "risco"]
    assert split_tags(None) == []


def test_render_detail():
    page = {
        "toolId": 1,
        "title": "Painel",
        "description": "Descrição",
        "imageUrl": None,
        "linkUrl": "https://example.com",
        "badge": "Novo",
        "slug": "painel",
        "owner": "Equipe PF3",
        "owner_contact": None,
        "data_source_url": "https://example.com/fonte",
        "tags": "a, b",
        "content_html": '<p>Corpo</p><script>x()</script>',
        "content_md": "# ignorado",
        "changelog_md": "- v1",
        "changelog_html": None,
        "updated_at": "2024-05-01T10:00:00",
    }
    view = render_detail(page)
    assert view.title == "Painel"
    assert view.metadata == [
        ("Owner", "Equipe PF3"),
        ("Data source link", "https://example.com/fonte"),
    ]
    assert view.tags == ["a", "b"]
    assert view.body_html == "<p>Corpo</p>"
    assert "<li>v1</li>" in view.changelog_html
    assert view.link_url == "https://example.com"


def test_render_detail_without_content():
    view = render_detail({"title": "Vazio", "slug": "vazio"})
    assert view.body_html is None
    assert view.changelog_html is None
    assert view.metadata == []
