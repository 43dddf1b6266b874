"""Find document by equality command."""

from collections.abc import Iterator
from typing import Any

from ..StageResult import StageResult
from ._open_collection import _open_collection
from ._output_models import StoreFindOutput
from .DocumentStoreError import DocumentStoreError
from .StoreConfig import StoreConfig


def cmd_find(store_config: StoreConfig, database: str, collection: str, field: str, value: Any) -> StageResult:
    """Return the first document of ``collection`` where ``field == value``."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Connecting to store...")
        try:
            with _open_collection(store_config, database, collection) as store:
                yield (0.6, "Searching...")
                document = store.search_by_equality((field, value))
        except DocumentStoreError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Search failed: {e}"
            result_obj.output = StoreFindOutput(
                errors=[str(e)],
                database=database,
                collection=collection,
                filter={field: value},
                document=None,
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        warnings = [] if document is not None else [f"No document where {field} == {value!r}"]
        result_obj.result = "Found 1 document" if document is not None else "No matching document"
        result_obj.output = StoreFindOutput(
            warnings=warnings,
            database=database,
            collection=collection,
            filter={field: value},
            document=document,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Searching {database}.{collection} for {field}={value!r}...",
        progress_callback=do_work,
    )
