from pydantic import BaseModel, ConfigDict, Field


class EncryptResult(BaseModel):
    model_config = ConfigDict(frozen=True)

    encrypted: str = Field(..., description="ASCII-armored PGP message")


class DecryptResult(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    decrypted_data: str = Field(..., alias="decryptedData", description="Recovered plaintext")


def render(result: BaseModel) -> str:
    """One JSON line, keys as the original CLI printed them."""
    return result.model_dump_json(by_alias=True)
