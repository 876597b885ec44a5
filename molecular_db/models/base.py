from pydantic import BaseModel, ConfigDict

class WireModel(BaseModel):
    """Base model for payloads whose wire names differ from attribute names.

    Attributes are snake_case; camelCase wire names are declared as aliases and
    either form is accepted on input.
    """
    model_config = ConfigDict(populate_by_name=True)

class FrozenWireModel(WireModel):
    """Immutable variant used for catalog descriptors"""
    model_config = ConfigDict(populate_by_name=True, frozen=True)
