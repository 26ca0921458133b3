import logging
from pathlib import Path

from quadtile.tms.batch import BatchConfig, BatchConverter

if __name__ == "__main__":

    format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
    logging.basicConfig(format=format, level=logging.INFO, datefmt="%H:%M:%S")
    # set to debug for more information

    # Load the conversion settings
    config = BatchConfig.from_yaml("data/config.yaml")

    # Initialize the converter
    converter = BatchConverter(
        config=config,
        logger=logging.getLogger("%s.BatchConverter" % __name__),  # noqa
    )

    output_path = "data/output"
    output_path = Path(output_path)
    output_path.mkdir(parents=True, exist_ok=True)
    tiles = converter.convert_csv("data/points.csv")
    tiles.to_csv(output_path / "tiles.csv", index=False)
    print(tiles[converter.output_columns].head())
