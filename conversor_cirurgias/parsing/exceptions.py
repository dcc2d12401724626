"""
Errors raised while converting a surgery export.
"""


class ConversionError(Exception):
    """Base class for every conversion failure shown to the user."""

    def __init__(self, message: str, filename: str = None):
        self.filename = filename
        full_message = f"{message}\nArquivo: {filename}" if filename else message
        super().__init__(full_message)


class ParseError(ConversionError):
    """
    Raised when the export cannot be parsed as XML at all.

    Carries the parser diagnostic so it can be shown verbatim.
    """

    def __init__(self, diagnostic: str, filename: str = None):
        self.diagnostic = diagnostic
        super().__init__(f"Erro de análise do XML: {diagnostic}", filename=filename)


class StructuralMismatchError(ConversionError):
    """
    Raised when a structural group lacks an expected nested group.

    This means the export does not follow the known report shape.
    """

    def __init__(self, missing_tag: str, parent_tag: str, context: str = None, filename: str = None):
        self.missing_tag = missing_tag
        self.parent_tag = parent_tag
        self.context = context
        message = f"Estrutura inesperada: <{parent_tag}> sem <{missing_tag}>"
        if context:
            message += f" ({context})"
        super().__init__(message, filename=filename)


class DateParseError(ConversionError):
    """Raised when a realization date is not a valid DD/MM/YY date."""

    def __init__(self, value: str, reason: str = None):
        self.value = value
        message = f"Data de realização inválida: '{value}'"
        if reason:
            message += f" ({reason})"
        super().__init__(message)


class EmptyResultError(ConversionError):
    """
    The export was read correctly but holds no eligible surgery.

    Callers present this as a "no data" notice, not as a failure.
    """

    def __init__(self, filename: str = None):
        super().__init__("Nenhum dado valido encontrado no arquivo XML.", filename=filename)
