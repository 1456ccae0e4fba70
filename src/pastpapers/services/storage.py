import logging
from pathlib import Path

import pandas as pd
from prefect import task

logger = logging.getLogger(__name__)

SUPPORTED_FORMATS = ("csv", "parquet")


@task(name="save_manifest")
def save_dataframe(
    df: pd.DataFrame, dest_dir: str | Path, name: str = "papers", format: str = "csv"
):
    """
    Save a result manifest locally as <dest_dir>/<name>.<format>.

    Returns the written path, or None when the frame is empty.
    """
    if format not in SUPPORTED_FORMATS:
        raise ValueError(f"Unsupported format {format!r}; use one of {SUPPORTED_FORMATS}")
    if df.empty:
        logger.warning("Empty DataFrame, nothing to save.")
        return None

    out_dir = Path(dest_dir)
    out_dir.mkdir(parents=True, exist_ok=True)
    out_file = out_dir / f"{name}.{format}"
    if format == "parquet":
        df.to_parquet(out_file)
    else:
        df.to_csv(out_file, index=False)

    logger.info("Manifest saved to %s", out_file)
    return str(out_file)
