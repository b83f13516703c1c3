import pytest

MISALIGNED_SOURCE = """
/**
 * Function description.
 *
 * @param {string} lorem Description.
 * @param {int} sit Description multi words.
 */
const fn = ( lorem, sit ) => {}
"""

ALIGNED_SOURCE = """
/**
 * Function description.
 *
 * @param {string} lorem Description.
 * @param {int}    sit   Description multi words.
 */
const fn = ( lorem, sit ) => {}
"""


@pytest.fixture
def misaligned_source():
    return MISALIGNED_SOURCE


@pytest.fixture
def aligned_source():
    return ALIGNED_SOURCE


@pytest.fixture
def misaligned_file(tmp_path):
    """Write a JS file with one misaligned JSDoc block and return its path."""
    path = tmp_path / "fn.js"
    path.write_text(MISALIGNED_SOURCE)
    return path


@pytest.fixture
def aligned_file(tmp_path):
    path = tmp_path / "ok.js"
    path.write_text(ALIGNED_SOURCE)
    return path


@pytest.fixture
def sample_config_yaml(tmp_path):
    """Write a minimal config YAML and return its path."""
    content = """
rule: params-alignment
tags:
  - param
  - returns
max_fix_passes: 3
"""
    path = tmp_path / "custom.yaml"
    path.write_text(content)
    return path
