from rekorcheck.version import BUILD_TIMESTAMP, COMMIT_HASH, VERSION, build_version


def test_default_version_string():
    assert build_version() == "dev-n/a (n/a)"


def test_defaults_match_module_values():
    assert build_version() == build_version(VERSION, COMMIT_HASH, BUILD_TIMESTAMP)


def test_custom_values_are_combined():
    assert build_version("1.2.0", "abc123", "2024-01-01") == "1.2.0-abc123 (2024-01-01)"


def test_version_part_comes_first():
    result = build_version("v9", "c", "t")
    assert result.startswith("v9-c")
    assert result.endswith("(t)")