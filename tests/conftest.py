import sys
from pathlib import Path
from typing import Generator

import pytest

ROOT_DIR = Path(__file__).resolve().parents[1]
if str(ROOT_DIR) not in sys.path:
    sys.path.insert(0, str(ROOT_DIR))

from speech_builder import AmazonSpeech, Speech
from speech_builder.shared.config import config as builder_config


@pytest.fixture
def speech() -> Speech:
    """A fresh core builder."""
    return Speech()


@pytest.fixture
def amazon_speech() -> AmazonSpeech:
    """A fresh builder with Amazon extensions."""
    return AmazonSpeech()


@pytest.fixture(autouse=True)
def isolated_config() -> Generator[None, None, None]:
    """Keep configuration changes made by a test from leaking into the next one."""
    saved = dict(builder_config.config)
    saved_file = dict(builder_config.file_config)
    saved_path = builder_config.config_path
    try:
        yield
    finally:
        builder_config.config = saved
        builder_config.file_config = saved_file
        builder_config.config_path = saved_path
