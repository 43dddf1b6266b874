"""Delete document by equality command."""

from collections.abc import Iterator
from typing import Any

from ..StageResult import StageResult
from ._open_collection import _open_collection
from ._output_models import StoreDeleteOutput
from .DocumentStoreError import DocumentStoreError
from .StoreConfig import StoreConfig


def cmd_delete(store_config: StoreConfig, database: str, collection: str, field: str, value: Any) -> StageResult:
    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Connecting to store...")
        try:
            with _open_collection(store_config, database, collection) as store:
                yield (0.6, "Deleting document...")
                outcome = store.delete_by_equality((field, value))
        except DocumentStoreError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Delete failed: {e}"
            result_obj.output = StoreDeleteOutput(
                errors=[str(e)], database=database, collection=collection, filter={field: value}
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        warnings = [] if outcome.deleted else [f"No document where {field} == {value!r}"]
        result_obj.result = f"Deleted {outcome.deleted_count} document(s)"
        result_obj.output = StoreDeleteOutput(
            warnings=warnings,
            database=database,
            collection=collection,
            filter={field: value},
            deleted_count=outcome.deleted_count,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Deleting from {database}.{collection}...",
        progress_callback=do_work,
    )
