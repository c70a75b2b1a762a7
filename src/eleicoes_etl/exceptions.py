# Este arquivo foi gerado/atualizado pelo DomTech Forger em 2026-10-19 10:12:48


class EleicoesETLError(RuntimeError):
    """Erro base do pipeline, com o contexto (ano, tipo de dado, arquivo) da falha."""

    def __init__(self, message, *, year=None, kind=None, path=None):
        super().__init__(message)
        self.year = year
        self.kind = kind
        self.path = path


# --- ERROS DE VALIDAÇÃO (levantados antes de qualquer acesso à rede ou disco) ---
class ValidationError(EleicoesETLError):
    pass


class InvalidYear(ValidationError):
    pass


class InvalidRegion(ValidationError):
    pass


class InvalidEncoding(ValidationError):
    pass


class InvalidOption(ValidationError):
    pass


# --- ERROS DO PIPELINE ---
class FetchError(EleicoesETLError):
    pass


class ExtractionError(EleicoesETLError):
    pass


class DecodeError(EleicoesETLError):
    pass


class EmptyResultError(EleicoesETLError):
    """O filtro de UFs não encontrou nenhum arquivo no ZIP."""


class SchemaMismatch(EleicoesETLError):
    """O número de colunas não bate com o esperado: o TSE mudou o formato do arquivo."""


class WriteError(EleicoesETLError):
    pass
