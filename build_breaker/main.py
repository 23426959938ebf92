"""Main entry point for the build breaker check"""

import sys
import argparse

from build_breaker import __version__
from build_breaker.alerts.alert_breaker import AlertBreaker, EvaluationResult, QualityGateError
from build_breaker.config.settings import BreakerConfig, load_config
from build_breaker.exporters.prometheus_exporter import AlertMetrics
from build_breaker.utils.logger import setup_logger, get_logger
from build_breaker.utils.measure_reader import read_measures


def parse_args(argv=None):
    """Parse command-line arguments"""
    parser = argparse.ArgumentParser(
        description='Break the build when project measures carry error alerts'
    )

    parser.add_argument(
        '--measures',
        '-m',
        type=str,
        required=True,
        help='Path to measures file (YAML or JSON)'
    )

    parser.add_argument(
        '--config',
        '-c',
        type=str,
        default=None,
        help='Path to configuration file (YAML)'
    )

    parser.add_argument(
        '--skip',
        action='store_true',
        help='Skip the evaluation and always pass'
    )

    parser.add_argument(
        '--log-level',
        '-l',
        type=str,
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        default=None,
        help='Override log level'
    )

    parser.add_argument(
        '--version',
        '-v',
        action='version',
        version=f'Build Breaker v{__version__}'
    )

    return parser.parse_args(argv)


def write_metrics(metrics, measures, result, logger):
    """Record and write evaluation metrics without changing the outcome"""
    metrics.record(measures, result)
    try:
        metrics.write_textfile()
    except OSError as e:
        logger.error(f"Failed to write metrics to {metrics.textfile}: {e}")


def main(argv=None):
    """Main entry point"""
    args = parse_args(argv)

    try:
        config = load_config(args.config)

        # Override from command line
        if args.skip:
            config['build_breaker']['skip'] = True

        logger = setup_logger(config, log_level=args.log_level)
        if args.config:
            logger.info(f"Loaded configuration from: {args.config}")

        measures = read_measures(args.measures)
        logger.info(f"Evaluating {len(measures)} measures from {args.measures}")

        metrics = AlertMetrics(config) if config['metrics']['enabled'] else None
        breaker = AlertBreaker(BreakerConfig.from_dict(config))

        if breaker.should_execute():
            result = breaker.analyse_measures(measures, get_logger('AlertBreaker'))
        else:
            result = EvaluationResult.success(skipped=True)

        if metrics:
            write_metrics(metrics, measures, result, logger)

        try:
            result.raise_for_status()
        except QualityGateError as e:
            logger.error(e.summary)
            return 1

        if result.skipped:
            logger.info("Build breaker is disabled, evaluation skipped")
        else:
            logger.info("No error alerts found")
        return 0

    except KeyboardInterrupt:
        print("\nInterrupted by user", file=sys.stderr)
        return 130
    except Exception as e:
        print(f"Fatal error: {e}", file=sys.stderr)
        import traceback
        traceback.print_exc()
        return 2


if __name__ == '__main__':
    sys.exit(main())
