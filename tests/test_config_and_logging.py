"""
Verification of configuration, audit logging and the synchronized facade.
"""

import dataclasses
import logging
import sys
import os
import threading

import numpy as np
import pytest

sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), "..")))

from config.config import GeneratorConfig
from core.float_generator import FloatGenerator, create
from core.synchronized import SynchronizedFloatGenerator
from sources.numpy_source import NumpySource
from utils.logger import AUDIT_LOGGER_NAME, AuditLogger


def test_config_defaults():
    config = GeneratorConfig()
    assert config.seed == 1
    assert config.source == "lagged_fibonacci"
    assert config.log_events is True


def test_config_is_frozen():
    config = GeneratorConfig(seed=9)
    with pytest.raises(dataclasses.FrozenInstanceError):
        config.seed = 10


def test_config_rejects_unknown_source():
    with pytest.raises(ValueError, match="Unknown integer source"):
        GeneratorConfig(source="dev-urandom")


def test_from_config_selects_source_and_seed():
    g = FloatGenerator.from_config(GeneratorConfig(seed=77, source="numpy"))
    assert isinstance(g.source, NumpySource)

    expected = FloatGenerator(NumpySource())
    expected.seed(77)
    np.testing.assert_array_equal(g.next_floats(100), expected.next_floats(100))


def test_default_config_matches_create():
    g1 = FloatGenerator.from_config(GeneratorConfig())
    g2 = create()
    np.testing.assert_array_equal(g1.next_floats(200), g2.next_floats(200))


def test_reseed_is_audited(caplog):
    caplog.set_level(logging.DEBUG, logger=AUDIT_LOGGER_NAME)
    g = create()
    g.seed(99)

    messages = [r.getMessage() for r in caplog.records if r.name == AUDIT_LOGGER_NAME]
    assert "generator_created source='LaggedFibonacciSource'" in messages
    assert "generator_reseeded seed=99" in messages


def test_sampling_is_not_audited(caplog):
    g = create()
    caplog.set_level(logging.DEBUG, logger=AUDIT_LOGGER_NAME)
    g.next_floats(50)
    assert not [r for r in caplog.records if r.name == AUDIT_LOGGER_NAME]


def test_disabled_audit_logger_is_silent(caplog):
    caplog.set_level(logging.DEBUG, logger=AUDIT_LOGGER_NAME)
    FloatGenerator.from_config(GeneratorConfig(log_events=False)).seed(5)
    assert not [r for r in caplog.records if r.name == AUDIT_LOGGER_NAME]


def test_audit_payload_is_key_sorted(caplog):
    caplog.set_level(logging.DEBUG, logger=AUDIT_LOGGER_NAME)
    AuditLogger().log_event("probe", {"b": 2, "a": 1})
    assert caplog.records[-1].getMessage() == "probe a=1 b=2"


def test_synchronized_generator_serializes_threads():
    num_threads = 4
    per_thread = 500

    shared = SynchronizedFloatGenerator(create())
    shared.seed(31)
    results = [None] * num_threads

    def worker(idx):
        results[idx] = [shared.next_float() for _ in range(per_thread)]

    threads = [threading.Thread(target=worker, args=(i,)) for i in range(num_threads)]
    for t in threads:
        t.start()
    for t in threads:
        t.join()

    reference = create()
    reference.seed(31)
    expected = np.sort(reference.next_floats(num_threads * per_thread))
    observed = np.sort(np.array([v for chunk in results for v in chunk], dtype=np.float32))
    np.testing.assert_array_equal(observed, expected)


def test_synchronized_batch_matches_plain_generator():
    shared = SynchronizedFloatGenerator(create())
    shared.seed(8)
    plain = create()
    plain.seed(8)
    np.testing.assert_array_equal(shared.next_floats(300), plain.next_floats(300))


if __name__ == "__main__":
    test_config_defaults()
    test_config_is_frozen()
    test_synchronized_generator_serializes_threads()
    print("Configuration verification SUCCESS")
