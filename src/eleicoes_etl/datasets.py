# Este arquivo foi gerado/atualizado pelo DomTech Forger em 2026-10-19 10:12:48

"""
Tabela fechada dos conjuntos de dados do TSE suportados.

Cada tipo de dado declara os anos disponíveis, o prefixo do ZIP e o schema de
colunas por faixa de anos. Adicionar um ano novo (ou um schema novo) é uma
mudança nesta tabela, não no pipeline.
"""

from dataclasses import dataclass

# --- SCHEMAS ---
LEGEND_COLUMNS_PRE_2018 = (
    "DATA_GERACAO", "HORA_GERACAO", "ANO_ELEICAO", "NUM_TURNO", "DESCRICAO_ELEICAO",
    "SIGLA_UF", "SIGLA_UE", "NOME_MUNICIPIO", "CODIGO_CARGO", "DESCRICAO_CARGO",
    "TIPO_LEGENDA", "NUMERO_PARTIDO", "SIGLA_PARTIDO", "NOME_PARTIDO", "SIGLA_COLIGACAO",
    "NOME_COLIGACAO", "COMPOSICAO_COLIGACAO", "SEQUENCIAL_COLIGACAO",
)

LEGEND_COLUMNS_2018 = (
    "DATA_GERACAO", "HORA_GERACAO", "ANO_ELEICAO", "COD_TIPO_ELEICAO", "NM_TIPO_ELEICAO",
    "NUM_TURNO", "COD_ELEICAO", "DESCRICAO_ELEICAO", "DATA_ELEICAO", "SIGLA_UF",
    "SIGLA_UE", "NOME_MUNICIPIO", "CODIGO_CARGO", "DESCRICAO_CARGO", "TIPO_LEGENDA",
    "NUMERO_PARTIDO", "SIGLA_PARTIDO", "NOME_PARTIDO", "SEQUENCIAL_COLIGACAO",
    "NOME_COLIGACAO", "COMPOSICAO_COLIGACAO",
)

SEATS_COLUMNS_PRE_2016 = (
    "DATA_GERACAO", "HORA_GERACAO", "ANO_ELEICAO", "DESCRICAO_ELEICAO",
    "SIGLA_UF", "SIGLA_UE", "NOME_UE", "CODIGO_CARGO", "DESCRICAO_CARGO",
    "QTDE_VAGAS",
)

SEATS_COLUMNS_2016 = (
    "DATA_GERACAO", "HORA_GERACAO", "ANO_ELEICAO", "COD_TIPO_ELEICAO",
    "NOME_TIPO_ELEICAO", "COD_ELEICAO", "DESCRICAO_ELEICAO",
    "DATA_ELEICAO", "DATA_POSSE", "SIGLA_UF", "SIGLA_UE", "NOME_UE",
    "CODIGO_CARGO", "DESCRICAO_CARGO", "QTDE_VAGAS",
)


@dataclass(frozen=True)
class DatasetKind:
    name: str
    description: str
    years: tuple
    # Antes deste ano os dados do TSE podem estar incompletos
    complete_from: int
    # (primeiro_ano, valor) em ordem crescente; vale o último com primeiro_ano <= ano
    prefixes: tuple
    schemas: tuple
    supports_full_country: bool = False

    def _pick(self, table, year):
        chosen = None
        for first_year, value in table:
            if year >= first_year:
                chosen = value
        if chosen is None:
            raise KeyError(f"{self.name}: nenhuma entrada para o ano {year}")
        return chosen

    def prefix_for(self, year):
        return self._pick(self.prefixes, year)

    def columns_for(self, year):
        return self._pick(self.schemas, year)


LEGEND_FED = DatasetKind(
    name="legend_fed",
    description="Legendas (partidos e coligações) das eleições federais",
    years=(1994, 1998, 2002, 2006, 2010, 2014, 2018),
    complete_from=2002,
    prefixes=((0, "consulta_legendas"), (2018, "consulta_coligacao")),
    schemas=((0, LEGEND_COLUMNS_PRE_2018), (2018, LEGEND_COLUMNS_2018)),
    supports_full_country=True,
)

SEATS_LOCAL = DatasetKind(
    name="seats_local",
    description="Número de vagas em disputa nas eleições municipais",
    years=(1996, 2000, 2004, 2008, 2012, 2016, 2020),
    complete_from=2000,
    prefixes=((0, "consulta_vagas"),),
    schemas=((0, SEATS_COLUMNS_PRE_2016), (2016, SEATS_COLUMNS_2016)),
)

DATASETS = {kind.name: kind for kind in (LEGEND_FED, SEATS_LOCAL)}


def get_dataset(name):
    """Retorna o DatasetKind registrado com esse nome."""
    try:
        return DATASETS[name]
    except KeyError:
        raise KeyError(f"Tipo de dado desconhecido: {name!r}. Opções: {sorted(DATASETS)}") from None
