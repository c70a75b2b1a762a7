# Este arquivo foi gerado/atualizado pelo DomTech Forger em 2026-10-19 10:12:48

import os
import logging
from datetime import datetime
from dotenv import load_dotenv

# --- CONFIGURAÇÃO GERAL ---
SCRIPT_VERSION = "1.0.0"
load_dotenv()

# --- VARIÁVEIS DE AMBIENTE ---
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_DIR = os.getenv("LOG_DIR", "logs")
DATA_DIR = os.getenv("DATA_DIR", "data")
EXPORT_DIR = os.getenv("EXPORT_DIR", ".")
TSE_BASE_URL = os.getenv("TSE_BASE_URL", "https://cdn.tse.jus.br/estatistica/sead/odsele")
REQUEST_TIMEOUT = int(os.getenv("REQUEST_TIMEOUT", 300))
# Arquivos menores que isso são placeholders vazios dentro dos ZIPs do TSE
MIN_FILE_SIZE = int(os.getenv("MIN_FILE_SIZE", 200))

# --- CONSTANTES ---
DEFAULT_ENCODING = "latin1"
CHUNK_SIZE = 8192
VALID_UFS = {
    "AC", "AL", "AP", "AM", "BA", "CE", "DF", "ES", "GO", "MA", "MT", "MS", "MG", "PA",
    "PB", "PR", "PE", "PI", "RJ", "RN", "RS", "RO", "RR", "SC", "SP", "SE", "TO",
}
# BR = Brasil, ZZ = Exterior, VT = Voto em Trânsito
RESERVED_REGIONS = {"BR", "ZZ", "VT"}
NATIONWIDE_MARKERS = {"BR", "BRASIL"}
ALL_REGIONS = "all"

# --- CONFIGURAÇÃO DE LOGGING ---
def setup_logging():
    os.makedirs(LOG_DIR, exist_ok=True)
    log_filename = f"etl_run_{datetime.now().strftime('%Y-%m-%d_%H-%M-%S')}.log"
    log_filepath = os.path.join(LOG_DIR, log_filename)

    logger = logging.getLogger("eleicoes_etl")
    logger.setLevel(LOG_LEVEL)

    if logger.hasHandlers():
        logger.handlers.clear()

    # Handler para o arquivo de log
    file_handler = logging.FileHandler(log_filepath, encoding='utf-8')
    file_handler.setFormatter(logging.Formatter("%(asctime)s - [%(levelname)s] - %(message)s"))
    logger.addHandler(file_handler)

    # Handler para o console
    console_handler = logging.StreamHandler()
    console_handler.setFormatter(logging.Formatter("[%(levelname)s] - %(message)s"))
    logger.addHandler(console_handler)

    return logger

logger = setup_logging()
