from typing import Any


class BaseCatalogException(Exception):
    """Base class for all Exceptions raised by appstream_catalog."""

    def __init__(self, message: str | None = None):
        """Initializes a new instance of BaseCatalogException class

        :param message: String containing description of the exception that occurred
        """
        super().__init__(message)
        self.message = message

    def __getstate__(self) -> dict[str, Any]:
        return {"dict": self.__dict__, "args": self.args}

    def __setstate__(self, state: dict[str, Any] | None) -> None:
        # state is always a dict from __getstate__, but the signature must
        # accept None to match BaseException.__setstate__
        assert state is not None
        self.__dict__.update(state["dict"])
        self.args = state["args"]

    def __reduce__(self) -> tuple[Any, ...]:
        state = self.__getstate__()
        return self.__class__.__new__, (self.__class__,), state


class DecodeError(BaseCatalogException):
    """A document could not be turned into a model.

    Decoding is all-or-nothing, so when one of these is raised no
    partially populated model is returned.
    """

    def __init__(self, message: str | None = None, path: str | None = None) -> None:
        """Constructor.

        :param message: Human-readable description of the underlying cause.

        :param path: Location of the offending field, for example
            `components[0].screenshots[1].images[0].width`. None when the
            problem is not tied to a single field.
        """
        if path:
            message = f"{path}: {message}"
        super().__init__(message)
        self.path = path


class MalformedDocument(DecodeError):
    """The input is not well-formed XML, or not the expected kind of document."""


class ValidationError(DecodeError, ValueError):
    """A value does not follow its grammar (identifier, URL, number, ...)."""


class MissingRequiredField(DecodeError):
    """A required element or attribute is absent."""
