# Este arquivo foi gerado/atualizado pelo DomTech Forger em 2026-10-19 10:12:48

import argparse
import sys
from .config import logger, SCRIPT_VERSION, DEFAULT_ENCODING
from .exceptions import EleicoesETLError
from .pipeline import legend_fed, seats_local


def save_or_summarize(df, output):
    if output:
        df.to_csv(output, sep=';', index=False)
        print(f"✅ {len(df)} registros salvos em: {output}")
    else:
        print(df.head().to_string())
        print(f"✅ {len(df)} registros, {df.shape[1]} colunas.")


def main(argv=None):
    """Função principal para analisar os argumentos e chamar a tarefa correta."""
    parser = argparse.ArgumentParser(description="Download e harmonização dos dados eleitorais do TSE.")
    parser.add_argument("--version", action="version", version=SCRIPT_VERSION)
    subparsers = parser.add_subparsers(dest="command", required=True, help="Comando a ser executado")

    base_parser = argparse.ArgumentParser(add_help=False)
    base_parser.add_argument("--year", type=int, required=True, help="Ano da eleição.")
    base_parser.add_argument("--uf", nargs="+", default=["all"], help="Siglas das UFs (ex.: SP RJ) ou 'all'.")
    base_parser.add_argument("--encoding", default=DEFAULT_ENCODING, help="Encoding original dos arquivos.")
    base_parser.add_argument("--ascii", action='store_true', help="Converte o texto para ASCII.")
    base_parser.add_argument("--export", action='store_true', help="Salva .dta e .sav no diretório de exportação.")
    base_parser.add_argument("--no-cache", action='store_true', help="Apaga o ZIP baixado ao final.")
    base_parser.add_argument("--output", help="Caminho de um CSV para salvar o resultado.")

    parser_legend = subparsers.add_parser("legend_fed", help="Legendas das eleições federais.", parents=[base_parser])
    parser_legend.add_argument("--br-archive", action='store_true', help="Usa o arquivo único do Brasil.")
    parser_legend.set_defaults(func=lambda args: legend_fed(
        args.year, args.uf, args.br_archive, args.ascii, args.encoding, args.export, not args.no_cache))

    parser_seats = subparsers.add_parser("seats_local", help="Vagas em disputa nas eleições municipais.", parents=[base_parser])
    parser_seats.set_defaults(func=lambda args: seats_local(
        args.year, args.uf, args.ascii, args.encoding, args.export, not args.no_cache))

    args = parser.parse_args(argv)
    try:
        df = args.func(args)
    except EleicoesETLError as e:
        logger.error(f"❌ {type(e).__name__}: {e}")
        return 1
    save_or_summarize(df, args.output)
    return 0

if __name__ == "__main__":
    sys.exit(main())
