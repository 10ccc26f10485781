#!/usr/bin/env python3
"""
RecruitTrack - contact and recruitment tracker.

Reads one command per line from stdin, applies it to the in-memory address
book and saves the whole book to a JSON file after every change.

Usage:
    recruittrack
    recruittrack --data-file ./data/candidates.json
    recruittrack --log-level DEBUG --log-file recruittrack.log

Configuration comes from environment variables / .env (see config/settings.py);
command-line flags override them.
"""
# Load environment variables from .env file first, before settings are read
from dotenv import load_dotenv
load_dotenv()

import argparse
import logging
import sys
from pathlib import Path
from typing import Optional

from config.settings import Settings, settings as default_settings
from recruit.app import RecruitTrackApp
from recruit.services.address_book import Model
from recruit.services.exceptions import DataLoadingError
from recruit.services.person import IdentityPolicy
from recruit.services.sample_data import get_sample_address_book
from recruit.services.storage import JsonAddressBookStorage

logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


def setup_logging(level: str = "INFO", log_file: Optional[str] = None) -> None:
    """Configure root logging to stderr (stdout carries command output) and optionally a file."""
    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]
    if log_file:
        handlers.append(logging.FileHandler(log_file, encoding="utf-8"))

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        handlers=handlers,
        force=True,
    )


def init_model(storage: JsonAddressBookStorage, identity: IdentityPolicy, seed_sample_data: bool = True) -> Model:
    """
    Build the session model from storage.

    - No data file: sample contacts (or empty if seeding is off)
    - Unreadable data file: empty model; the file is only replaced on the next save
    """
    try:
        address_book = storage.load()
        if address_book is None and seed_sample_data:
            logger.info(f"Creating a new data file {storage.file_path} populated with a sample address book.")
            address_book = get_sample_address_book(identity)
        elif address_book is None:
            logger.info(f"Creating a new data file {storage.file_path}.")
    except DataLoadingError as e:
        logger.warning(f"Data file at {storage.file_path} could not be loaded "
                       f"({e.message}). Will be starting with an empty address book.")
        address_book = None

    return Model(address_book, data_path=storage.file_path, identity=identity)


def build_app(config: Settings) -> RecruitTrackApp:
    identity = IdentityPolicy(config.duplicate_policy)
    storage = JsonAddressBookStorage(
        config.data_path,
        backup_path=config.backup_path if config.backups_enabled else None,
        backup_count=config.backup_count,
        identity=identity,
    )
    model = init_model(storage, identity, seed_sample_data=config.seed_sample_data)
    return RecruitTrackApp(model, storage)


def main(argv: Optional[list[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="RecruitTrack contact and recruitment tracker")
    parser.add_argument("--data-file", help="JSON data file (overrides RECRUIT_DATA_PATH)")
    parser.add_argument("--log-level", help="Logging level (overrides RECRUIT_LOG_LEVEL)")
    parser.add_argument("--log-file", help="Also write logs to this file (overrides RECRUIT_LOG_FILE)")
    args = parser.parse_args(argv)

    overrides = {}
    if args.data_file:
        overrides["data_path"] = Path(args.data_file)
    if args.log_level:
        overrides["log_level"] = args.log_level
    if args.log_file:
        overrides["log_file"] = args.log_file
    config = default_settings.model_copy(update=overrides)

    setup_logging(config.log_level, config.log_file or None)
    logger.info("=============================[ Initializing RecruitTrack ]===========================")
    logger.info(f"Using data file: {config.data_path}")

    app = build_app(config)
    try:
        saved = app.run()
    except KeyboardInterrupt:
        logger.info("Interrupted, saving before exit")
        saved = app.shutdown()
    return 0 if saved else 1


if __name__ == "__main__":
    sys.exit(main())
