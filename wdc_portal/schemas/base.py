from typing import Any, Dict
import json
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

class BaseSchema(BaseModel):
	"""
	Base schema class with JSON-safe serialization.
	"""
	
	def to_dict(self) -> Dict[str, Any]:
		"""Convert model to a JSON-safe dictionary (datetimes as ISO strings)."""
		return json.loads(self.model_dump_json(by_alias=True))


class CamelSchema(BaseSchema):
	"""
	Schema exposed to the dashboard: camelCase keys on the wire,
	snake_case attributes in Python. Either spelling is accepted on input.
	"""
	
	model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)
