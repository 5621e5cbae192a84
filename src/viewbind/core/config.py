"""
Binding configuration.

Names the two attributes the engine recognizes in a document and the
BeautifulSoup tree builder used when parsing markup.
"""

from pydantic import BaseModel, ConfigDict, field_validator


class BindingConfig(BaseModel):
    """
    Attribute names and parser settings shared by views of one document.

    Params:
        scope_attribute: Attribute marking a scope container, its value is the scope name
        prop_attribute: Attribute marking a prop leaf, its value is the prop name
        parser: BeautifulSoup tree builder name used by ``View.from_string``
    """

    model_config = ConfigDict(frozen=True)

    scope_attribute: str = "data-scope"
    prop_attribute: str = "data-prop"
    parser: str = "html.parser"

    @field_validator("scope_attribute", "prop_attribute")
    @classmethod
    def _validate_attribute_name(cls, value: str) -> str:
        if not value or value.strip() != value or any(c.isspace() for c in value):
            raise ValueError("attribute name must be non-empty and contain no whitespace")
        return value


DEFAULT_CONFIG = BindingConfig()
