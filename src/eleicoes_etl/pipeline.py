# Este arquivo foi gerado/atualizado pelo DomTech Forger em 2026-10-19 10:12:48

from dataclasses import dataclass
from typing import Union
from .config import logger, DATA_DIR, EXPORT_DIR, DEFAULT_ENCODING
from .datasets import DatasetKind, get_dataset
from .exceptions import EleicoesETLError, WriteError
from .validate import validate_year, validate_uf, validate_encoding, validate_flag, validate_full_country
from .etl.endpoints import resolve_archive
from .etl.extract import request_workspace, fetch_archive, extract_archive, discover_files
from .etl.merge import merge_region_files
from .etl.transform import normalize_schema, to_ascii
from .etl.load import export_data


@dataclass(frozen=True)
class DatasetRequest:
    kind: DatasetKind
    year: int
    # "all" ou frozenset de siglas
    regions: Union[str, frozenset]
    full_country: bool = False
    encoding: str = DEFAULT_ENCODING
    keep_cache: bool = True
    ascii: bool = False
    export: bool = False


def build_request(kind_name, year, uf="all", br_archive=False, ascii=False,
                  encoding=DEFAULT_ENCODING, export=False, temp=True):
    """Valida os argumentos e monta a requisição. Nada é baixado ou gravado aqui."""
    kind = get_dataset(kind_name)
    return DatasetRequest(
        kind=kind,
        year=validate_year(kind, year),
        regions=validate_uf(uf),
        full_country=validate_full_country(kind, br_archive),
        encoding=validate_encoding(encoding),
        keep_cache=validate_flag("temp", temp),
        ascii=validate_flag("ascii", ascii),
        export=validate_flag("export", export),
    )


def run(request, data_dir=DATA_DIR, export_dir=EXPORT_DIR):
    """Executa download, extração, junção e renomeação para uma requisição validada."""
    kind, year = request.kind, request.year
    print(f"🚀 Iniciando {kind.description} ({year})...")

    descriptor = resolve_archive(kind, year)
    try:
        with request_workspace(descriptor, data_dir, request.keep_cache) as workspace:
            fetch_archive(descriptor, workspace.archive_path, request.keep_cache)
            extract_archive(workspace.archive_path, workspace.year_dir)
            print("Processando os dados...")
            file_set = discover_files(workspace.year_dir, request.full_country)
            df = merge_region_files(file_set, request.regions, request.encoding)
        df = normalize_schema(df, kind, year)
    except EleicoesETLError as e:
        if e.year is None:
            e.year = year
        if e.kind is None:
            e.kind = kind.name
        raise

    if request.ascii:
        df = to_ascii(df)

    if request.export:
        try:
            export_data(df, f"{kind.name}_{year}", export_dir)
        except WriteError as e:
            logger.error(f"Exportação falhou, os dados continuam disponíveis em memória: {e}")

    logger.info(f"Done. {len(df)} registros de {kind.name} {year}.")
    return df


def legend_fed(year, uf="all", br_archive=False, ascii=False, encoding=DEFAULT_ENCODING, export=False, temp=True):
    """
    Baixa e junta as legendas (partidos e coligações) das eleições federais.

    Para eleições anteriores a 2002 algumas informações podem estar incompletas.
    Com br_archive=True lê apenas o arquivo único do Brasil. Com temp=True o ZIP
    baixado é mantido em DATA_DIR para as próximas chamadas.
    """
    request = build_request("legend_fed", year, uf, br_archive, ascii, encoding, export, temp)
    return run(request)


def seats_local(year, uf="all", ascii=False, encoding=DEFAULT_ENCODING, export=False, temp=True):
    """Baixa e junta o número de vagas em disputa nas eleições municipais."""
    request = build_request("seats_local", year, uf, False, ascii, encoding, export, temp)
    return run(request)
