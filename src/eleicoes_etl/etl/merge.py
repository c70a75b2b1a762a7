# Este arquivo foi gerado/atualizado pelo DomTech Forger em 2026-10-19 10:12:48

import csv
import os
import pandas as pd
from tqdm import tqdm
from ..config import logger, ALL_REGIONS
from ..exceptions import DecodeError, EmptyResultError, SchemaMismatch
from .extract import region_of

# Primeira coluna das linhas de cabeçalho que o TSE inclui nos arquivos mais novos
HEADER_MARKERS = {"DT_GERACAO", "DATA_GERACAO"}


def check_row_widths(path, encoding, width):
    """Confere que cada registro do arquivo tem exatamente `width` campos."""
    with open(path, newline="", encoding=encoding) as f:
        reader = csv.reader(f, delimiter=";", quotechar='"')
        for row in reader:
            # pandas também ignora linhas em branco
            if row and len(row) != width:
                logger.error(f"{os.path.basename(path)}, linha {reader.line_num}: {len(row)} campos, esperado {width}.")
                raise SchemaMismatch(
                    f"{path}, linha {reader.line_num}: {len(row)} campos, esperado {width}.", path=path
                )


def select_files(file_set, regions):
    """Filtra os arquivos pela sigla embutida no nome. O arquivo do Brasil passa sempre."""
    if regions == ALL_REGIONS or file_set.full_country:
        return list(file_set.files)
    return [path for path in file_set.files if region_of(path) in regions]


def read_region_file(path, encoding):
    """Lê um arquivo do TSE (separado por ';', sem cabeçalho) com todas as colunas como texto."""
    try:
        df = pd.read_csv(path, sep=';', header=None, dtype=str, encoding=encoding, quotechar='"', na_filter=False)
    except UnicodeDecodeError as e:
        logger.error(f"Não foi possível decodificar {os.path.basename(path)} como {encoding}: {e}")
        raise DecodeError(f"{path} não está em {encoding}: {e}", path=path) from e
    except pd.errors.EmptyDataError:
        logger.warning(f"Arquivo vazio ignorado: {path}")
        return None
    except pd.errors.ParserError as e:
        logger.error(f"Linha com número de campos inesperado em {os.path.basename(path)}: {e}")
        raise SchemaMismatch(f"Formato inesperado em {path}: {e}", path=path) from e

    # o read_csv completa com "" as linhas curtas
    check_row_widths(path, encoding, df.shape[1])

    if len(df) and str(df.iat[0, 0]).strip().upper() in HEADER_MARKERS:
        df = df.iloc[1:].reset_index(drop=True)
    return df


def merge_region_files(file_set, regions, encoding):
    """Junta, na ordem de descoberta, os arquivos das UFs pedidas em um único DataFrame."""
    selected = select_files(file_set, regions)
    if not selected:
        if file_set.full_country:
            wanted = "Brasil"
        elif regions == ALL_REGIONS:
            wanted = ALL_REGIONS
        else:
            wanted = ", ".join(sorted(regions))
        raise EmptyResultError(f"Nenhum arquivo encontrado em {file_set.directory} para: {wanted}.", path=file_set.directory)

    df_list = []
    for path in tqdm(selected, desc="Lendo arquivos"):
        df = read_region_file(path, encoding)
        if df is None:
            continue
        if df_list and df.shape[1] != df_list[0].shape[1]:
            raise SchemaMismatch(
                f"{os.path.basename(path)} tem {df.shape[1]} colunas, esperado {df_list[0].shape[1]}.", path=path
            )
        df_list.append(df)

    if not df_list:
        raise EmptyResultError(f"Os arquivos selecionados em {file_set.directory} estão vazios.", path=file_set.directory)

    full_df = pd.concat(df_list, ignore_index=True)
    logger.info(f"Sucesso! {len(full_df)} registros lidos de {len(df_list)} arquivo(s).")
    return full_df
