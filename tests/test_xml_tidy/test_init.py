"""Test module for xml_tidy package initialization."""


def test_package_import() -> None:
    """Test that the package can be imported successfully."""
    # Arrange & Act
    import xml_tidy

    # Assert
    assert xml_tidy is not None


def test_package_has_version() -> None:
    """Test that the package has a version attribute."""
    # Arrange & Act
    import xml_tidy

    # Assert
    assert isinstance(xml_tidy.__version__, str)
    assert xml_tidy.__version__ == "0.1.0"


def test_package_has_author() -> None:
    """Test that the package has an author attribute."""
    # Arrange & Act
    import xml_tidy

    # Assert
    assert xml_tidy.__author__ == "XML Tidy Team"


def test_package_exports_resolve() -> None:
    """Test that every name in __all__ is importable from the package."""
    # Arrange & Act
    import xml_tidy

    # Assert
    for name in xml_tidy.__all__:
        assert hasattr(xml_tidy, name), name
    assert {"format", "compress", "validate", "XMLTidy"} <= set(xml_tidy.__all__)


def test_simple_api_round_trip() -> None:
    """Test the Level 1 functions from the package root."""
    # Arrange
    from xml_tidy import compress, format

    # Act
    formatted = format("<r><a>1</a></r>")

    # Assert
    assert formatted == "<r>\n    <a>1</a>\n</r>"
    assert compress(formatted) == "<r><a>1</a></r>"
