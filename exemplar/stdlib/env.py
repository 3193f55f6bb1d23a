from exemplar.stdlib.bridge.orm import exports as orm_exports
from exemplar.stdlib.bridge.imports import exports as imports_exports
from exemplar.stdlib.bridge.access import exports as access_exports
from exemplar.stdlib.bridge.errors import exports as errors_exports
from exemplar.stdlib.bridge.events import exports as events_exports


def gather():
    env = {}

    env.update(orm_exports)
    env.update(imports_exports)
    env.update(access_exports)
    env.update(errors_exports)
    env.update(events_exports)

    return env
