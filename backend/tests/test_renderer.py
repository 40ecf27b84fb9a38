"""Tests for the chat renderer and log container."""

from gamehelp.core.renderer import ChatLog, ChatRenderer
from gamehelp.schemas.chat import Message, Role


def test_render_appends_and_scrolls():
    log = ChatLog()
    renderer = ChatRenderer(log)

    renderer.render("first", Role.USER)
    node = renderer.render("second", Role.BOT)

    assert log.nodes[-1] is node
    assert log.scroll_top == 2
    assert node.css_classes == ["message", "bot-message"]


def test_markup_to_html():
    renderer = ChatRenderer(ChatLog())
    node = renderer.render(
        "Use **Estus** and *roll*. See [the map](https://darksouls3.wiki.fextralife.com/Maps).",
        Role.BOT,
    )
    assert "<strong>Estus</strong>" in node.html
    assert "<em>roll</em>" in node.html
    assert '<a href="https://darksouls3.wiki.fextralife.com/Maps">the map</a>' in node.html


def test_raw_html_is_escaped():
    renderer = ChatRenderer(ChatLog())
    node = renderer.render("<script>alert(1)</script>", Role.USER)
    assert "<script>" not in node.html
    assert "&lt;script&gt;" in node.html


def test_unsafe_link_not_rendered():
    renderer = ChatRenderer(ChatLog())
    node = renderer.render("[click](javascript:alert(1))", Role.BOT)
    assert 'href="javascript:' not in node.html


def test_literal_rendering_without_markup():
    renderer = ChatRenderer(ChatLog(), markup=False)
    node = renderer.render("**not bold** <b>", Role.BOT)
    assert node.html == "<p>**not bold** &lt;b&gt;</p>"


def test_redraw_replaces_log():
    log = ChatLog()
    renderer = ChatRenderer(log)
    renderer.render("stale", Role.USER)

    renderer.redraw([Message(role=Role.BOT, text="hello"), Message(role=Role.USER, text="hi")])

    assert [n.role for n in log.nodes] == [Role.BOT, Role.USER]
    assert "stale" not in "".join(n.html for n in log.nodes)
    assert log.scroll_top == 2


def test_typing_indicator_not_logged():
    log = ChatLog()
    renderer = ChatRenderer(log)
    node = renderer.typing_indicator()
    assert node.pending is True
    assert "typing-indicator" in node.css_classes
    assert log.nodes == []
