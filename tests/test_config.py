import os

import pytest

from wordle_scorer import config


def test_workers_from_env_accepts_positive_integers():
    assert config.workers_from_env("3") == 3


@pytest.mark.parametrize("value", [None, "", "0", "-4", "many", "2.5"])
def test_workers_from_env_falls_back_to_cpu_count(value):
    assert config.workers_from_env(value) == (os.cpu_count() or 1)


def test_max_workers_is_positive():
    assert config.MAX_WORKERS >= 1
