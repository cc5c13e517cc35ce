from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Tuple, Dict, Any


class Card(BaseModel):
    """A collectible card as published by the upstream HearthstoneJSON feed"""
    name: Optional[str] = Field(None, description="Display name, used for search")
    set: Optional[str] = Field(None, description="Card set identifier (e.g., 'CORE')")
    type: Optional[str] = Field(None, description="Card category (e.g., 'SPELL')")
    card_class: Optional[str] = Field(None, alias="cardClass", description="Class identifier (e.g., 'MAGE')")
    cost: Optional[int] = Field(None, ge=0, description="Mana cost")
    rarity: Optional[str] = None
    text: Optional[str] = None
    flavor: Optional[str] = None

    # Upstream fields we do not model (id, dbfId, attack, ...) are kept and
    # written back out so the JSON API returns the feed's objects unchanged.
    model_config = ConfigDict(populate_by_name=True, extra="allow")

    def to_wire(self) -> Dict[str, Any]:
        """Serialise using the upstream field names, omitting fields absent from the input"""
        return self.model_dump(by_alias=True, exclude_unset=True)


# The snapshot type: immutable so it can be shared by concurrent readers.
CatalogSnapshot = Tuple[Card, ...]
