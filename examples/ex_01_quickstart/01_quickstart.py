"""Quickstart: register factories under keys and resolve them lazily.

Keys are identity tokens: two keys with the same label never collide.
Factories receive the registry, so they can look up their own dependencies.
"""

from __future__ import annotations

from dataclasses import dataclass

from keywire import DependencyKey, Registry, create_key


@dataclass
class Database:
    host: str


@dataclass
class UserRepository:
    database: Database


DatabaseKey: DependencyKey[Database] = create_key("database")
RepositoryKey: DependencyKey[UserRepository] = create_key("repository")
AnotherDatabaseKey: DependencyKey[Database] = create_key("database")


def main() -> None:
    registry = (
        Registry()
        .set(DatabaseKey, lambda _: Database(host="localhost"))
        .set(RepositoryKey, lambda r: UserRepository(database=r.get(DatabaseKey)))
    )

    repository = registry.get(RepositoryKey)
    print(f"db_host={repository.database.host}")  # => db_host=localhost

    print(f"same_label_registered={AnotherDatabaseKey in registry}")  # => same_label_registered=False
    print(f"same_label_value={registry.get(AnotherDatabaseKey)}")  # => same_label_value=None

    fresh = registry.get(RepositoryKey)
    print(f"cached={fresh is repository}")  # => cached=False


if __name__ == "__main__":
    main()
