"""
Common model base shared by the scope and assistance models.
"""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    """
    Base model whose wire format is camelCase.

    The calling workflow speaks camelCase JSON (storyId, customerStory, ...),
    while Python code uses snake_case attributes. Both names are accepted on
    input; dump with by_alias=True to produce the wire format.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
    )
