# Este arquivo foi gerado/atualizado pelo DomTech Forger em 2026-10-19 10:12:48

import os
import pandas as pd
import pyreadstat
from ..config import logger, EXPORT_DIR
from ..exceptions import WriteError


def _with_object_strings(df):
    # Stata e SPSS só aceitam texto em colunas object
    df = df.copy()
    for col in df.columns:
        if pd.api.types.is_string_dtype(df[col]):
            df[col] = df[col].astype(object)
    return df


def export_data(df, name, directory=EXPORT_DIR):
    """Salva o DataFrame em .dta (Stata) e .sav (SPSS). Retorna os caminhos gravados."""
    dta_path = os.path.join(directory, f"{name}.dta")
    sav_path = os.path.join(directory, f"{name}.sav")
    print(f"🚀 Exportando {len(df)} registros para {dta_path} e {sav_path}...")
    df = _with_object_strings(df)
    try:
        os.makedirs(directory, exist_ok=True)
        df.to_stata(dta_path, write_index=False, version=118)
        pyreadstat.write_sav(df, sav_path)
    except (OSError, ValueError, pyreadstat.ReadstatError) as e:
        logger.error(f"Erro ao exportar {name}: {e}")
        raise WriteError(f"Falha ao gravar {name} em {directory}: {e}", path=directory) from e
    print("✅ Exportação concluída.")
    return dta_path, sav_path
