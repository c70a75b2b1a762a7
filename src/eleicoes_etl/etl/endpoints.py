# Este arquivo foi gerado/atualizado pelo DomTech Forger em 2026-10-19 10:12:48

from dataclasses import dataclass
from ..config import TSE_BASE_URL
from ..exceptions import InvalidYear


@dataclass(frozen=True)
class ArchiveDescriptor:
    url: str
    filename: str
    year: int
    kind: str


def resolve_archive(kind, year, base_url=TSE_BASE_URL):
    """Monta a URL e o nome do ZIP do TSE para o tipo de dado e o ano."""
    if year not in kind.years:
        raise InvalidYear(f"Ano {year} indisponível para {kind.name}.", year=year, kind=kind.name)

    # A partir de 2018 o TSE passou a chamar as legendas de "coligação"
    prefix = kind.prefix_for(year)
    filename = f"{prefix}_{year}.zip"
    return ArchiveDescriptor(url=f"{base_url}/{prefix}/{filename}", filename=filename, year=year, kind=kind.name)
