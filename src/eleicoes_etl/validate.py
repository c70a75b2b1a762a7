# Este arquivo foi gerado/atualizado pelo DomTech Forger em 2026-10-19 10:12:48

import codecs
from .config import logger, VALID_UFS, RESERVED_REGIONS, ALL_REGIONS
from .exceptions import InvalidYear, InvalidRegion, InvalidEncoding, InvalidOption


def validate_year(kind, year):
    """Confere se o ano pertence aos anos disponíveis para o tipo de dado."""
    if isinstance(year, bool) or not isinstance(year, int):
        raise InvalidYear(f"Ano inválido: {year!r}. Use um inteiro, ex.: 2018.", year=year, kind=kind.name)
    if year not in kind.years:
        years = ", ".join(str(y) for y in kind.years)
        raise InvalidYear(f"Ano {year} indisponível para {kind.name}. Anos disponíveis: {years}.", year=year, kind=kind.name)
    if year < kind.complete_from:
        logger.warning(f"Para eleições anteriores a {kind.complete_from}, algumas informações de {kind.name} podem estar incompletas.")
    return year


def validate_uf(uf):
    """
    Normaliza o filtro de UFs.

    Aceita uma sigla, uma lista de siglas ou "all". Retorna "all" ou um
    frozenset de siglas em caixa alta. Só rejeita siglas mal formadas; siglas
    desconhecidas passam (com aviso) e resultam em nenhum arquivo encontrado.
    """
    if isinstance(uf, str):
        uf = [uf]
    if not isinstance(uf, (list, tuple, set, frozenset)) or not uf:
        raise InvalidRegion(f"Filtro de UF inválido: {uf!r}.")

    codes = set()
    for item in uf:
        if not isinstance(item, str):
            raise InvalidRegion(f"UF inválida: {item!r}. Use duas letras, ex.: 'SP'.")
        code = item.replace(" ", "").upper()
        if not code or not code.isalpha():
            raise InvalidRegion(f"UF inválida: {item!r}. Use duas letras, ex.: 'SP'.")
        codes.add(code)

    if ALL_REGIONS.upper() in codes:
        return ALL_REGIONS

    unknown = codes - VALID_UFS - RESERVED_REGIONS
    if unknown:
        logger.warning(f"UF(s) desconhecida(s) no filtro: {', '.join(sorted(unknown))}.")
    return frozenset(codes)


def validate_encoding(encoding):
    if not isinstance(encoding, str) or not encoding:
        raise InvalidEncoding(f"Encoding inválido: {encoding!r}.")
    try:
        codecs.lookup(encoding)
    except LookupError as e:
        raise InvalidEncoding(f"Encoding desconhecido: {encoding!r}.") from e
    return encoding


def validate_flag(name, value):
    if not isinstance(value, bool):
        raise InvalidOption(f"O argumento '{name}' deve ser True ou False, recebido {value!r}.")
    return value


def validate_full_country(kind, full_country):
    validate_flag("br_archive", full_country)
    if full_country and not kind.supports_full_country:
        raise InvalidOption(f"{kind.name} não possui arquivo único para o Brasil.", kind=kind.name)
    return full_country
