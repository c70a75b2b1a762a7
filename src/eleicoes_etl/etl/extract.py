# Este arquivo foi gerado/atualizado pelo DomTech Forger em 2026-10-19 10:12:48

import os
import shutil
import zipfile
from contextlib import contextmanager
from dataclasses import dataclass
import requests
from tqdm import tqdm
from ..config import logger, DATA_DIR, CHUNK_SIZE, REQUEST_TIMEOUT, MIN_FILE_SIZE, NATIONWIDE_MARKERS
from ..exceptions import FetchError, ExtractionError


@dataclass(frozen=True)
class Workspace:
    archive_path: str
    year_dir: str


@dataclass(frozen=True)
class ExtractedFileSet:
    directory: str
    files: tuple
    full_country: bool = False


@contextmanager
def request_workspace(descriptor, root=DATA_DIR, keep_cache=True):
    """
    Reserva o caminho do ZIP e o diretório do ano para uma requisição.

    Na saída (com ou sem erro) o diretório do ano é sempre removido; o ZIP só
    é mantido quando keep_cache=True.
    """
    os.makedirs(root, exist_ok=True)
    workspace = Workspace(
        archive_path=os.path.join(root, descriptor.filename),
        year_dir=os.path.join(root, str(descriptor.year)),
    )
    try:
        yield workspace
    finally:
        if os.path.isdir(workspace.year_dir):
            try:
                shutil.rmtree(workspace.year_dir)
            except OSError as e:
                logger.warning(f"Não foi possível remover {workspace.year_dir}: {e}")
        if not keep_cache and os.path.exists(workspace.archive_path):
            os.remove(workspace.archive_path)
            logger.debug(f"ZIP temporário removido: {workspace.archive_path}")


def _discard(path):
    if os.path.exists(path):
        os.remove(path)


def fetch_archive(descriptor, target_path, keep_cache=True, timeout=REQUEST_TIMEOUT):
    """Baixa o ZIP do TSE para target_path (uma única tentativa)."""
    if keep_cache and os.path.exists(target_path) and zipfile.is_zipfile(target_path):
        logger.info(f"Usando arquivo ZIP local já baixado: {target_path}")
        return target_path

    logger.info(f"Baixando dados de: {descriptor.url}")
    try:
        response = requests.get(descriptor.url, stream=True, timeout=timeout)
        response.raise_for_status()
        with open(target_path, 'wb') as f:
            total_size = int(response.headers.get('content-length', 0))
            with tqdm(total=total_size, unit='iB', unit_scale=True, desc=descriptor.filename) as pbar:
                for chunk in response.iter_content(chunk_size=CHUNK_SIZE):
                    pbar.update(len(chunk))
                    f.write(chunk)
    except (requests.exceptions.RequestException, OSError) as e:
        _discard(target_path)
        logger.error(f"Erro ao baixar o arquivo ZIP: {e}")
        raise FetchError(f"Falha ao baixar {descriptor.url}: {e}", year=descriptor.year, kind=descriptor.kind, path=target_path) from e

    if os.path.getsize(target_path) == 0 or not zipfile.is_zipfile(target_path):
        _discard(target_path)
        logger.error(f"O conteúdo baixado de {descriptor.url} não é um ZIP válido.")
        raise FetchError(f"Arquivo inválido recebido de {descriptor.url}", year=descriptor.year, kind=descriptor.kind, path=target_path)

    logger.info(f"Download concluído. Arquivo salvo em: {target_path}")
    return target_path


def extract_archive(archive_path, year_dir):
    """Descompacta o ZIP em year_dir, apagando antes restos de uma execução anterior."""
    try:
        if os.path.exists(year_dir):
            logger.warning(f"Removendo diretório anterior: {year_dir}")
            shutil.rmtree(year_dir)
        os.makedirs(year_dir)
        with zipfile.ZipFile(archive_path) as z:
            z.extractall(year_dir)
            logger.info(f"{len(z.namelist())} arquivo(s) extraído(s) em {year_dir}")
    except (zipfile.BadZipFile, OSError) as e:
        logger.error(f"Erro ao extrair {archive_path}: {e}")
        raise ExtractionError(f"Falha ao extrair {archive_path}: {e}", path=archive_path) from e
    return year_dir


def region_of(path):
    """Sigla embutida no nome do arquivo, ex.: consulta_vagas_2020_SP.csv -> SP."""
    stem = os.path.splitext(os.path.basename(path))[0]
    return stem.rsplit("_", 1)[-1].upper()


def is_nationwide(path):
    return region_of(path) in NATIONWIDE_MARKERS


def discover_files(directory, full_country=False, min_size=MIN_FILE_SIZE):
    """
    Lista os arquivos de dados extraídos, em ordem de nome.

    Ignora PDFs (LEIAME) e arquivos vazios. Com full_country=True retorna só o
    arquivo do Brasil inteiro; caso contrário, só os arquivos por UF.
    """
    found = []
    for dirpath, _, filenames in os.walk(directory):
        for name in filenames:
            path = os.path.join(dirpath, name)
            if name.lower().endswith('.pdf') or os.path.getsize(path) <= min_size:
                continue
            if is_nationwide(path) == full_country:
                found.append(path)

    files = tuple(sorted(found, key=lambda p: (os.path.basename(p), p)))
    return ExtractedFileSet(directory=directory, files=files, full_country=full_country)
