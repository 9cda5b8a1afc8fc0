from pydantic import BaseModel, ConfigDict
from typing import Union


class User(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: Union[int, str, None] = None
    name: str = ""
    email: str = ""
    role: str = "user"


class LoginResult(BaseModel):
    token: str
    user: User
