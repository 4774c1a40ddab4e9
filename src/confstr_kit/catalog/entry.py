from pydantic import BaseModel, ConfigDict


class ConfStrEntry(BaseModel):
    model_config = ConfigDict(extra="forbid")

    name: str
    description: str = ""
    conf_str: str
