"""Insert document command."""

from collections.abc import Iterator
from typing import Any

from ..StageResult import StageResult
from ._open_collection import _open_collection
from ._output_models import StoreInsertOutput
from .DocumentStoreError import DocumentStoreError
from .StoreConfig import StoreConfig


def cmd_insert(store_config: StoreConfig, database: str, collection: str, document: dict[str, Any]) -> StageResult:
    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        yield (0.2, "Connecting to store...")
        try:
            with _open_collection(store_config, database, collection) as store:
                yield (0.6, "Inserting document...")
                inserted = store.insert(document)
        except DocumentStoreError as e:
            yield (1.0, "Complete")
            result_obj.result = f"Insert failed: {e}"
            result_obj.output = StoreInsertOutput(
                errors=[str(e)], database=database, collection=collection, document=None
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Inserted 1 document into {database}.{collection}"
        result_obj.output = StoreInsertOutput(
            database=database, collection=collection, document=dict(inserted)
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Inserting into {database}.{collection}...",
        progress_callback=do_work,
    )
