from pydantic import AliasChoices, BaseModel, Field, TypeAdapter


class BaseAPIModel(BaseModel):
    model_config = {"extra": "ignore"}


class Game(BaseAPIModel):
    id: int
    name: str
    domain_name: str
    genre: str | None = None
    nexusmods_url: str | None = None
    approved_date: int | None = None
    mods: int = 0
    downloads: int = 0
    file_count: int = 0

    @property
    def is_approved(self) -> bool:
        return bool(self.approved_date)


class ModAuthor(BaseAPIModel):
    member_id: int | None = None
    name: str | None = None


class Mod(BaseAPIModel):
    mod_id: int
    game_id: int
    domain_name: str
    name: str | None = None
    summary: str | None = None
    version: str | None = None
    author: str | None = None
    uploaded_by: str | None = None
    category_id: int | None = None
    endorsement_count: int = 0
    mod_downloads: int = 0
    mod_unique_downloads: int = 0
    updated_time: str | None = None
    contains_adult_content: bool = False
    status: str | None = None
    available: bool = True
    user: ModAuthor | None = None

    @property
    def url(self) -> str:
        return f"https://www.nexusmods.com/{self.domain_name}/mods/{self.mod_id}"


class ValidatedUser(BaseAPIModel):
    user_id: int
    name: str
    is_premium: bool = Field(default=False, validation_alias=AliasChoices("is_premium", "is_premium?"))
    is_supporter: bool = Field(default=False, validation_alias=AliasChoices("is_supporter", "is_supporter?"))
    email: str | None = None
    profile_url: str | None = None


GameList = TypeAdapter(list[Game])

__all__ = ["Game", "GameList", "Mod", "ModAuthor", "ValidatedUser"]
