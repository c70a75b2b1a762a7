import io
import zipfile

import pytest
import requests


def make_rows(columns, uf, n=3, **overrides):
    """Gera n linhas posicionais com SIGLA_UF/SIGLA_UE = uf (valores sobrescrevíveis por coluna)."""
    rows = []
    for i in range(n):
        values = {col: f"{col.lower()}_{i}" for col in columns}
        values.update({"SIGLA_UF": uf, "SIGLA_UE": uf})
        values.update(overrides)
        rows.append([values[col] for col in columns])
    return rows


def csv_bytes(rows, encoding="latin1", header=None):
    lines = []
    if header:
        lines.append(";".join(f'"{h}"' for h in header))
    lines += [";".join(f'"{v}"' for v in row) for row in rows]
    return ("\n".join(lines) + "\n").encode(encoding)


def zip_bytes(files):
    buf = io.BytesIO()
    with zipfile.ZipFile(buf, "w") as z:
        for name, content in files.items():
            # data fixa para o mesmo conteúdo gerar os mesmos bytes
            z.writestr(zipfile.ZipInfo(name, date_time=(2020, 1, 1, 0, 0, 0)), content)
    return buf.getvalue()


class FakeResponse:
    def __init__(self, body=b"", status_code=200):
        self.body = body
        self.status_code = status_code
        self.headers = {"content-length": str(len(body))}

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Client Error")

    def iter_content(self, chunk_size=1):
        for i in range(0, len(self.body), chunk_size):
            yield self.body[i:i + chunk_size]


@pytest.fixture
def fake_tse(monkeypatch):
    """
    Substitui requests.get: cada URL registrada devolve o corpo configurado;
    qualquer outra devolve 404. As URLs chamadas ficam em fake_tse.calls.
    """
    class FakeTSE:
        def __init__(self):
            self.routes = {}
            self.calls = []

        def serve(self, url, body, status_code=200):
            self.routes[url] = (body, status_code)

        def get(self, url, *args, **kwargs):
            self.calls.append(url)
            body, status = self.routes.get(url, (b"", 404))
            return FakeResponse(body, status)

    tse = FakeTSE()
    monkeypatch.setattr(requests, "get", tse.get)
    return tse


@pytest.fixture
def no_network(monkeypatch):
    def _blocked(*args, **kwargs):
        raise AssertionError("requests.get não deve ser chamado")

    monkeypatch.setattr(requests, "get", _blocked)
