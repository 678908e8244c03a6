from typing import Annotated

from tinyinjector import component

from sample_app.storage import Database, UserRepository


@component
class Greeter:
    def __init__(self, users: Annotated[UserRepository, "primary"], db: Database):
        self.users = users
        self.db = db

    def greet(self, user_id):
        return f"Welcome, {self.users.find(user_id)['name']}!"


class UnmarkedGreeter(Greeter):
    pass
