"""
Linha de comando: processa colunas de um CSV e plota entrada/saída.

    python -m inertial_dsp dados.csv -w 13 --start 5 --end 10 --plot-dir plots
"""

import argparse
import logging
import sys
from dataclasses import replace
from pathlib import Path
from typing import List, Optional

from .infrastructure.config import get_settings, setup_logging
from .use_cases import ProcessSignalUseCase, ProcessRequest

logger = logging.getLogger(__name__)


def build_parser() -> argparse.ArgumentParser:
    settings = get_settings()
    parser = argparse.ArgumentParser(
        prog="inertial_dsp",
        description="Suaviza colunas de aceleração, aplica ZUPT e detecta movimento.",
    )
    parser.add_argument(
        "data_file",
        nargs="?",
        type=Path,
        default=settings.data_file,
        help=f"Arquivo CSV de entrada (default: {settings.data_file})",
    )
    parser.add_argument("-w", "--window", type=int, default=settings.window_size, help="Janela da média móvel")
    parser.add_argument("--start", type=int, default=settings.start_column, help="Primeira coluna (base zero)")
    parser.add_argument("--end", type=int, default=settings.end_column, help="Última coluna (inclusive)")
    parser.add_argument("--lowpass", action="store_true", help="Aplica o passa-baixa após a média móvel")
    parser.add_argument("--plot-dir", type=Path, default=settings.plot_dir, help="Diretório para salvar o gráfico")
    parser.add_argument("--log-level", default=settings.log_level, help="Nível de log (INFO, DEBUG, ...)")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level)

    settings = replace(get_settings(), window_size=args.window)
    use_case = ProcessSignalUseCase(settings)
    report = use_case.execute(
        ProcessRequest(
            data_file=args.data_file,
            start_column=args.start,
            end_column=args.end,
            apply_lowpass=args.lowpass,
            plot_dir=args.plot_dir,
        )
    )

    for channel in report.channels:
        print(
            f"coluna {channel.column}: {channel.count} valores, status={channel.status}, "
            f"estacionário={channel.stationary}, movimento={channel.motion_samples}"
        )

    if not report.any_success:
        logger.error("Nenhuma coluna processada de %s", args.data_file)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
