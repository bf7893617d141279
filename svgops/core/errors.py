"""
svgops Compile Errors

Every failure of a compilation is a CompileError. A document either
compiles completely or raises one of these; there is no partial output.
"""

from typing import Optional


class CompileError(Exception):
    """Base class for all compilation failures."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message
        self.filename: Optional[str] = None
        self.line: Optional[int] = None
        self.column: Optional[int] = None

    def locate(self, filename: Optional[str], line: Optional[int],
               column: Optional[int] = None) -> 'CompileError':
        """Attach a source position unless one is already known."""
        if self.filename is None:
            self.filename = filename
        if self.line is None:
            self.line = line
            self.column = column
        return self

    def __str__(self) -> str:
        parts = []
        if self.filename:
            parts.append(self.filename)
        if self.line is not None:
            parts.append(str(self.line))
            if self.column is not None:
                parts.append(str(self.column))
        if not parts:
            return self.message
        return f"{':'.join(parts)}: {self.message}"

    def __reduce__(self):
        # Subclass constructors take differing arguments; rebuild from state.
        return (_restore_error, (type(self), self.__dict__.copy()))


def _restore_error(cls, state):
    error = cls.__new__(cls)
    Exception.__init__(error, state['message'])
    error.__dict__.update(state)
    return error


# Structural errors: the element tree itself is unacceptable

class StructuralError(CompileError):
    pass


class InvalidRoot(StructuralError):
    def __init__(self, tag: str):
        super().__init__(f"invalid SVG root: <{tag}>")
        self.tag = tag


class UnsupportedNamespace(StructuralError):
    def __init__(self, namespace: str):
        super().__init__(f"unsupported SVG namespace: {namespace!r}")
        self.namespace = namespace


class UnsupportedElement(StructuralError):
    def __init__(self, tag: str):
        super().__init__(f"unsupported tag: <{tag}>")
        self.tag = tag


class UnexpectedEndOfInput(StructuralError):
    pass


class MalformedDocument(StructuralError):
    """The XML tokenizer rejected the input."""


# Attribute errors: an attribute value cannot be decoded

class SVGAttributeError(CompileError):
    pass


class InvalidNumber(SVGAttributeError):
    def __init__(self, text: str, attribute: str = ""):
        where = f" in {attribute} attribute" if attribute else ""
        super().__init__(f"invalid number{where}: {text!r}")
        self.text = text
        self.attribute = attribute


class InvalidViewBox(SVGAttributeError):
    def __init__(self, text: str):
        super().__init__(f"invalid viewBox attribute: {text}")
        self.text = text


class MalformedPoints(SVGAttributeError):
    def __init__(self, text: str):
        super().__init__(f"odd number of coordinates in points attribute: {text!r}")
        self.text = text


class UnsupportedTransform(SVGAttributeError):
    def __init__(self, text: str):
        super().__init__(f"unsupported transform: {text!r}")
        self.text = text


class InvalidColor(SVGAttributeError):
    def __init__(self, text: str):
        super().__init__(f"invalid color: {text!r}")
        self.text = text


# Path syntax errors: the d attribute of a <path> is malformed

class PathSyntaxError(CompileError):
    def __init__(self, message: str, fragment: str):
        super().__init__(message)
        self.fragment = fragment


class UnknownPathCommand(PathSyntaxError):
    def __init__(self, command: str, fragment: str):
        super().__init__(f"unknown <path> command {command} in {fragment!r}", fragment)
        self.command = command


class MalformedPathData(PathSyntaxError):
    def __init__(self, reason: str, fragment: str):
        super().__init__(f"{reason} in <path> data: {fragment!r}", fragment)
