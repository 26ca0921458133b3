import json
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, Union

import yaml


class Parser(ABC):
    """Abstract class for parsers."""

    @staticmethod
    @abstractmethod
    def load(file: Union[str, Path]) -> Dict:
        """Load data from a file.

        Parameters
        ----------
        file : str | Path
            file path

        Returns
        -------
        Dict
            data
        """
        pass

    @staticmethod
    @abstractmethod
    def dump(data: Dict, file: Union[str, Path]) -> None:
        """Dump data to a file.

        Parameters
        ----------
        data : Dict
            data to dump
        file : str | Path
            file path
        """
        pass


class YamlParser(Parser):
    """YAML parser."""

    @staticmethod
    def load(file: Union[str, Path]) -> Dict:
        with open(file, "r") as stream:
            return yaml.safe_load(stream)

    @staticmethod
    def dump(data: Dict, file: Union[str, Path]) -> None:
        with open(file, "w") as stream:
            yaml.safe_dump(data, stream)


class JsonParser(Parser):
    """JSON parser."""

    @staticmethod
    def load(file: Union[str, Path]) -> Dict:
        with open(file, "r") as stream:
            return json.load(stream)

    @staticmethod
    def dump(data: Dict, file: Union[str, Path]) -> None:
        with open(file, "w") as stream:
            json.dump(data, stream)
