# application/schemas/address_schema.py
from typing import Optional
from pydantic import BaseModel, field_validator


class RawAddressSchema(BaseModel, extra='allow'):
 street: str
 city: str
 postcode: str
 lat: Optional[float] = None
 long: Optional[float] = None

 @field_validator('street', 'city', 'postcode', mode='before')
 def coerce_to_string(cls, v):
  if isinstance(v, bool):
   raise ValueError("must be a string")
  if isinstance(v, (int, float)):
   return str(v)
  return v

 @field_validator('street', 'city', 'postcode')
 def not_blank(cls, v):
  if not v.strip():
   raise ValueError("must not be blank")
  return v

 @field_validator('lat', 'long', mode='before')
 def parse_coordinate_optional(cls, value):
  if value is None or value == '':
   return None
  try:
   return float(value)
  except (ValueError, TypeError):
   return None
