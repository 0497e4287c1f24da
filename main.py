#!/usr/bin/env python
"""
Print spool server startup.

Reads the configuration, prepares the spool directory, removes orphaned
print jobs and serves POST /print until interrupted.
"""
import argparse
import logging
import sys

from spooler.config import DEFAULT_CONFIG_PATH, Config, load_config
from spooler.errors import ConfigError, DirectoryError
from spooler.job_manager import PrintJobManager
from web.app import create_app

logger = logging.getLogger("print_spool_server")


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Network front end for the local print spooler.")
    parser.add_argument(
        "--config",
        default=DEFAULT_CONFIG_PATH,
        help=f"path to the JSON configuration file (default: {DEFAULT_CONFIG_PATH})",
    )
    return parser.parse_args(argv)


def configure_logging(config: Config) -> None:
    logging.basicConfig(
        level=logging.DEBUG if config.debug else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def log_banner(config: Config) -> None:
    logger.debug("Starting server...")
    logger.info("-------------------------------------------------------------")
    logger.info("Runs on HTTPS: %s", config.https)
    logger.info("Runs on Port: %d", config.port)
    logger.info("Print at %s", config.printer_label)
    logger.info("Debug: %s", config.debug)
    logger.info("Print Directory: %s", config.print_dir)
    logger.info("-------------------------------------------------------------")


def main(argv=None) -> int:
    args = parse_args(argv)

    try:
        config = load_config(args.config)
        config.check_certificates()
    except ConfigError as e:
        logging.basicConfig(level=logging.INFO)
        logger.critical("%s", e)
        return 1

    configure_logging(config)
    log_banner(config)

    manager = PrintJobManager.from_config(config)
    try:
        manager.recover_orphans()
    except DirectoryError as e:
        logger.critical("%s", e)
        return 1

    app = create_app(config, manager)
    logger.debug("Print handler setup completed.")

    ssl_context = (config.cert_file, config.key_file) if config.https else None
    try:
        app.run(
            host=config.host,
            port=config.port,
            threaded=True,
            ssl_context=ssl_context,
        )
    finally:
        manager.shutdown()
    return 0


if __name__ == "__main__":
    sys.exit(main())
