"""Print a login URL and, given an id token, the logged in user's profile."""

import asyncio
import logging
import os

from pydantic import BaseModel

from auth0_api import IdToken, audience, auth0_authorize_url, auth0_config, fetch_auth0_profile


class Preferences(BaseModel):
    theme: str = "light"


async def main():
    config = auth0_config()
    print(  # noqa: T201
        auth0_authorize_url(
            config,
            "token",
            os.environ.get("AUTH0_REDIRECT_URL", "http://localhost:3000/"),
            ["openid", "name", "email"],
            audience=audience(),
        )
    )

    id_token = os.environ.get("AUTH0_ID_TOKEN")
    if not id_token:
        return
    profile = await fetch_auth0_profile(
        config.endpoint, IdToken(id_token), user_metadata_type=Preferences
    )
    print(f"Welcome, {profile.name}!")  # noqa: T201
    print(profile.model_dump_json(indent=2))  # noqa: T201


if __name__ == "__main__":
    logging.basicConfig(level=logging.DEBUG)
    asyncio.run(main())
