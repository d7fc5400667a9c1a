from pydantic import BaseModel, ConfigDict
from typing import Any, Dict


class CamelModel(BaseModel):
    """Accepts both the wire names (camelCase) and the Python attribute names."""
    model_config = ConfigDict(populate_by_name=True)

    def to_json_dict(self) -> Dict[str, Any]:
        """camelCase JSON form, as returned by the model and served to the front-end."""
        return self.model_dump(mode="json", by_alias=True)
