"""Exceptions raised by the chat core and its collaborators."""


class ChatError(Exception):
    """Base class for chat widget errors."""


class StorageError(ChatError):
    """The key-value store refused a write (connection lost, quota exceeded)."""


class RelayError(ChatError):
    """The relay could not produce a reply (transport, non-2xx or bad payload)."""


class LLMServiceError(ChatError):
    """The generative-language API returned an error or an empty answer."""


class ChatBusyError(ChatError):
    """A message was submitted while the previous reply is still pending."""
