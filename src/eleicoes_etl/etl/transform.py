# Este arquivo foi gerado/atualizado pelo DomTech Forger em 2026-10-19 10:12:48

import unicodedata
import pandas as pd
from ..config import logger
from ..exceptions import SchemaMismatch


def normalize_schema(df, kind, year):
    """Aplica os nomes de colunas do ano ao DataFrame posicional."""
    columns = kind.columns_for(year)
    if df.shape[1] != len(columns):
        logger.error(f"{kind.name} {year}: {df.shape[1]} colunas lidas, {len(columns)} esperadas.")
        raise SchemaMismatch(
            f"{kind.name} {year}: esperado {len(columns)} colunas, encontrado {df.shape[1]}. "
            "O formato dos arquivos do TSE pode ter mudado.",
            year=year, kind=kind.name,
        )
    df = df.copy()
    df.columns = list(columns)
    return df


def ascii_text(value):
    if not isinstance(value, str):
        return value
    # Remove acentos
    nfkd = unicodedata.normalize('NFKD', value)
    clean = "".join(c for c in nfkd if not unicodedata.combining(c))
    return clean.encode('ascii', 'replace').decode('ascii')


def to_ascii(df):
    """Converte todas as colunas de texto para ASCII (sem acentos; o resto vira '?')."""
    df = df.copy()
    for col in df.columns:
        if pd.api.types.is_string_dtype(df[col]):
            df[col] = df[col].map(ascii_text)
    return df
