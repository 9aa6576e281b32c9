from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class UltmtModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_payload(self) -> dict:
        return self.model_dump(mode="json", by_alias=True)


class EmbeddedUser(UltmtModel):
    id: str
    first_name: str
    last_name: str
    username: str
