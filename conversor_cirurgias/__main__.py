"""
Conversão em lote pela linha de comando.

    python -m conversor_cirurgias relatorio.xml --mensal --saida planilhas/
"""
import argparse
import os
import sys

from conversor_cirurgias.common.logging_config import setup_logging, get_logger
from conversor_cirurgias.common.settings import get_settings
from conversor_cirurgias.parsing.config.layout import load_layout
from conversor_cirurgias.parsing.exceptions import ConversionError, EmptyResultError
from conversor_cirurgias.parsing.pipeline import ConversionPipeline

logger = get_logger("cli")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="conversor_cirurgias",
        description="Converte o relatório XML de cirurgias em planilhas Excel.",
    )
    parser.add_argument("arquivo", help="Arquivo XML exportado pelo sistema hospitalar")
    parser.add_argument("--mensal", action="store_true", help="Gera uma planilha por mês")
    parser.add_argument("--saida", default=None, help="Diretório de saída (padrão: CIRURGIAS_OUTPUT_DIR)")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    settings = get_settings()
    setup_logging(settings.log_level, settings.log_file)

    output_dir = args.saida or settings.output_dir
    pipeline = ConversionPipeline(load_layout(settings.layout_file))

    try:
        with open(args.arquivo, 'rb') as f:
            raw = f.read()
        result = pipeline.run(raw, filename=os.path.basename(args.arquivo), monthly=args.mensal)
    except EmptyResultError as e:
        print(str(e), file=sys.stderr)
        return 1
    except (ConversionError, OSError) as e:
        print(f"Erro ao processar o arquivo: {e}", file=sys.stderr)
        return 1

    os.makedirs(output_dir, exist_ok=True)
    for artifact in result.artifacts:
        path = os.path.join(output_dir, artifact.filename)
        with open(path, 'wb') as f:
            f.write(artifact.content)
        logger.info(f"Artifact written: {path}", record_count=artifact.record_count)

    print(result.summary_message())
    return 0


if __name__ == "__main__":
    sys.exit(main())
