"""Show collection command."""

from collections.abc import Iterator

from ..StageResult import StageResult
from ._open_collection import _open_collection
from ._output_models import StoreShowOutput
from .DocumentStoreError import DocumentStoreError
from .StoreConfig import StoreConfig


def cmd_show(store_config: StoreConfig, database: str, collection: str) -> StageResult:
    """Connect, probe liveness, select ``collection`` and fetch every document."""

    def do_work(result_obj: StageResult) -> Iterator[tuple[float, str]]:
        """Do the actual work - generator that yields progress and updates result.

        Yields: (progress_percent: float, message: str) tuples
        Updates result_obj.result, result_obj.output, and result_obj.success before finishing.
        """
        yield (0.2, "Connecting to store...")
        try:
            with _open_collection(store_config, database, collection) as store:
                yield (0.6, "Fetching documents...")
                documents = store.fetch_all()
        except DocumentStoreError as e:
            yield (1.0, "Complete")
            result_obj.result = str(e)
            result_obj.output = StoreShowOutput(
                errors=[str(e)],
                database=database,
                collection=collection,
                count=0,
                documents=[],
            ).model_dump(mode="python")
            result_obj.success = False
            return

        yield (1.0, "Complete")
        result_obj.result = f"Found {len(documents)} document(s) in {database}.{collection}"
        result_obj.output = StoreShowOutput(
            database=database,
            collection=collection,
            count=len(documents),
            documents=documents,
        ).model_dump(mode="python")
        result_obj.success = True

    return StageResult(
        announce=f"Showing {database}.{collection}...",
        progress_callback=do_work,
    )
