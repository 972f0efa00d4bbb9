from microblog.setup.ioc.container import (
    AppProvider,
    InMemoryStoreProvider,
    create_container,
)

__all__ = ["AppProvider", "InMemoryStoreProvider", "create_container"]
