import pandas as pd
import pytest

from conftest import make_rows
from eleicoes_etl.datasets import LEGEND_FED, SEATS_LOCAL
from eleicoes_etl.etl.transform import ascii_text, normalize_schema, to_ascii
from eleicoes_etl.exceptions import SchemaMismatch


@pytest.mark.parametrize(
    "kind, year, width",
    [
        (LEGEND_FED, 1994, 18),
        (LEGEND_FED, 2014, 18),
        (LEGEND_FED, 2018, 21),
        (SEATS_LOCAL, 1996, 10),
        (SEATS_LOCAL, 2012, 10),
        (SEATS_LOCAL, 2016, 15),
        (SEATS_LOCAL, 2020, 15),
    ],
)
def test_schema_by_year(kind, year, width):
    columns = kind.columns_for(year)
    assert len(columns) == width
    df = pd.DataFrame(make_rows(columns, "SP"))
    out = normalize_schema(df, kind, year)
    assert list(out.columns) == list(columns)
    assert out.values.tolist() == df.values.tolist()


def test_schema_specific_fields():
    assert LEGEND_FED.columns_for(2014)[7] == "NOME_MUNICIPIO"
    assert "DATA_ELEICAO" not in LEGEND_FED.columns_for(2014)
    assert {"COD_TIPO_ELEICAO", "NM_TIPO_ELEICAO", "DATA_ELEICAO"} <= set(LEGEND_FED.columns_for(2018))
    assert {"DATA_POSSE", "COD_TIPO_ELEICAO"} <= set(SEATS_LOCAL.columns_for(2016))
    assert "DATA_POSSE" not in SEATS_LOCAL.columns_for(2012)


def test_schema_mismatch():
    df = pd.DataFrame(make_rows(LEGEND_FED.columns_for(2018), "SP"))
    with pytest.raises(SchemaMismatch) as exc:
        normalize_schema(df, LEGEND_FED, 2014)
    assert exc.value.year == 2014 and exc.value.kind == "legend_fed"


def test_normalize_does_not_touch_input():
    df = pd.DataFrame(make_rows(SEATS_LOCAL.columns_for(2020), "AC"))
    normalize_schema(df, SEATS_LOCAL, 2020)
    assert list(df.columns) == list(range(15))


def test_ascii_text():
    assert ascii_text("SÃO PAULO") == "SAO PAULO"
    assert ascii_text("COLIGAÇÃO É NÓS") == "COLIGACAO E NOS"
    assert ascii_text("1º TURNO") == "1o TURNO"
    assert ascii_text("€ 10") == "? 10"
    assert ascii_text(None) is None


def test_to_ascii_is_idempotent():
    df = pd.DataFrame({"NOME_UE": ["GOIÂNIA", "SÃO LUÍS", "BRASÍLIA"], "QTDE_VAGAS": [29, 31, 24]})
    once = to_ascii(df)
    assert once["NOME_UE"].tolist() == ["GOIANIA", "SAO LUIS", "BRASILIA"]
    assert once["QTDE_VAGAS"].tolist() == [29, 31, 24]
    assert to_ascii(once).equals(once)
    assert df["NOME_UE"].tolist()[0] == "GOIÂNIA"
