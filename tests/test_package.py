"""Basic package tests for oslicense."""


def test_package_imports() -> None:
    """Test that the main package can be imported."""
    import oslicense

    assert oslicense.__version__ == "0.1.0"


def test_cli_imports() -> None:
    """Test that the CLI module can be imported."""
    from oslicense.cli import main

    assert main is not None


def test_subpackages_import() -> None:
    """Test that all subpackages can be imported."""
    import oslicense.config
    import oslicense.models
    import oslicense.output
    import oslicense.resolvers

    assert oslicense.config is not None
    assert oslicense.models is not None
    assert oslicense.output is not None
    assert oslicense.resolvers is not None
