"""Chat renderer - turns messages into HTML nodes appended to a scrolling log."""

from html import escape

from markdown_it import MarkdownIt

from gamehelp.schemas.chat import Message, RenderedMessage, Role

ROLE_CLASSES = {
    Role.USER: "user-message",
    Role.BOT: "bot-message",
}

TYPING_TEXT = "..."

# CommonMark without raw HTML: bold, italics and links only survive as markup
_markdown = MarkdownIt("commonmark", {"html": False})


class ChatLog:
    """The log container: an ordered list of nodes and a scroll position."""

    def __init__(self):
        self.nodes: list[RenderedMessage] = []
        self.scroll_top = 0

    def append(self, node: RenderedMessage) -> None:
        self.nodes.append(node)
        self.scroll_to_end()

    def scroll_to_end(self) -> None:
        self.scroll_top = len(self.nodes)

    def clear(self) -> None:
        self.nodes = []
        self.scroll_top = 0


class ChatRenderer:
    def __init__(self, log: ChatLog, markup: bool = True):
        self.log = log
        self.markup = markup

    def to_html(self, text: str) -> str:
        if self.markup:
            return _markdown.render(text)
        return f"<p>{escape(text)}</p>"

    def node(self, text: str, role: Role, pending: bool = False) -> RenderedMessage:
        classes = ["message", ROLE_CLASSES[role]]
        if pending:
            classes.append("typing-indicator")
        return RenderedMessage(
            role=role, html=self.to_html(text), css_classes=classes, pending=pending
        )

    def render(self, text: str, role: Role) -> RenderedMessage:
        """Render a message into the log and scroll to it."""
        node = self.node(text, role)
        self.log.append(node)
        return node

    def redraw(self, messages: list[Message]) -> None:
        """Replace the whole log with a session's messages."""
        self.log.clear()
        for message in messages:
            self.render(message.text, message.role)

    def typing_indicator(self) -> RenderedMessage:
        """Transient placeholder shown while a reply is pending. Never logged."""
        return self.node(TYPING_TEXT, Role.BOT, pending=True)
