######################################################################
# Copyright 2016, 2024 John J. Rofrano. All Rights Reserved.
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
# https://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.
######################################################################

"""
Models for Stocks

A Stock is one promotional entry. The whole collection lives in a single
XML file:

    <stocks>
      <stock>
        <img>...</img>
        <title>...</title>
        ...
      </stock>
    </stocks>

Every field is kept as a list of strings, one entry per occurrence of the
child element, so reads and writes share one shape.
"""

import logging
import os
import re
import stat
import tempfile
import threading
import xml.etree.ElementTree as ET
from typing import Dict, List, Optional

from flask import current_app

logger = logging.getLogger(__name__)

ROOT_TAG = "stocks"
RECORD_TAG = "stock"
FIELDS = ("img", "title", "release_date", "category", "description")

MISSING_DATA_MESSAGE = "Отсутствуют необходимые данные для добавления акции"

# XML element names and the characters XML 1.0 cannot carry
FIELD_NAME_RE = re.compile(r"^(?!xml)[^\W\d][\w.-]*\Z", re.IGNORECASE)
ILLEGAL_XML_CHARS_RE = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff\ufffe\uffff]")
# XML parsers report every line ending as "\n"
LINE_ENDING_RE = re.compile(r"\r\n?")


class DataValidationError(Exception):
    """Used for data validation errors when deserializing a Stock."""


class StoreError(Exception):
    """Base class for failures of the XML store."""


class StorageReadError(StoreError):
    """Used when the store file cannot be read."""


class FormatError(StoreError):
    """Used when the store file cannot be parsed into stocks."""


class StorageWriteError(StoreError):
    """Used when the collection cannot be serialized or written back."""


def _to_texts(name: str, value) -> List[str]:
    """Normalizes a request value into the list-of-strings field shape."""
    if isinstance(value, (list, tuple)):
        texts = []
        for item in value:
            texts.extend(_to_texts(name, item))
        return texts
    if isinstance(value, dict):
        raise DataValidationError(f"Недопустимое значение поля '{name}'")
    if value is None:
        return [""]
    if isinstance(value, bool):
        return ["true" if value else "false"]
    text = str(value)
    if ILLEGAL_XML_CHARS_RE.search(text):
        raise DataValidationError(f"Недопустимое значение поля '{name}'")
    return [LINE_ENDING_RE.sub("\n", text)]


class Stock:
    """
    Class that represents a Stock (a promotion card)
    """

    def __init__(self, **fields):
        self.fields: Dict[str, List[str]] = {}
        for name, value in fields.items():
            self.fields[name] = _to_texts(name, value)

    def __repr__(self):
        return f"<Stock {self.title!r}>"

    def __eq__(self, other):
        if not isinstance(other, Stock):
            return NotImplemented
        return self.fields == other.fields

    @property
    def title(self) -> Optional[str]:
        """First title text, or None when the stock has no title"""
        texts = self.fields.get("title")
        return texts[0] if texts else None

    def create(self):
        """Appends this Stock to the end of the collection."""
        logger.info("Creating %s", self.title)
        return store.append_record(self)

    def serialize(self) -> dict:
        """Serializes a Stock into a dictionary."""
        return {name: list(texts) for name, texts in self.fields.items()}

    def deserialize(self, data):
        """
        Deserializes a Stock from a dictionary.

        Only the title is required. Values may be plain scalars or lists;
        both are stored as lists of strings.

        Args:
            data (dict): a dictionary containing the stock data
        """
        if not data or not isinstance(data, dict):
            raise DataValidationError(MISSING_DATA_MESSAGE)
        title = data.get("title")
        if not title or not any(_to_texts("title", title)):
            raise DataValidationError(MISSING_DATA_MESSAGE)

        for name in data:
            if not isinstance(name, str) or not FIELD_NAME_RE.match(name):
                raise DataValidationError(f"Недопустимое имя поля '{name}'")
        self.fields = {name: _to_texts(name, value) for name, value in data.items()}

        # the reader is the final judge of what may be written
        try:
            ET.fromstring(ET.tostring(self.to_element(), encoding="utf-8"))
        except (ET.ParseError, ValueError) as error:
            raise DataValidationError("Недопустимые данные акции") from error
        return self

    ##################################################
    # XML mapping
    ##################################################

    def to_element(self) -> ET.Element:
        """Builds the <stock> element for this Stock"""
        element = ET.Element(RECORD_TAG)
        for name, texts in self.fields.items():
            for text in texts:
                ET.SubElement(element, name).text = text
        return element

    @classmethod
    def from_element(cls, element: ET.Element) -> "Stock":
        """Reads a Stock back from its <stock> element"""
        if element.tag != RECORD_TAG:
            raise FormatError(f"Unexpected element <{element.tag}> in <{ROOT_TAG}>")
        stock = cls()
        for child in element:
            if len(child):
                raise FormatError(f"Field <{child.tag}> must contain only text")
            stock.fields.setdefault(child.tag, []).append(child.text or "")
        return stock

    ##################################################
    # CLASS METHODS
    ##################################################

    @classmethod
    def all(cls) -> List["Stock"]:
        """Returns all Stocks in stored order"""
        logger.info("Processing all Stocks")
        return store.list_records()


class StockStore:
    """
    File backed store for the stocks collection

    The path is looked up in the current app's config (STOCKS_FILE) on every
    call, so a test can point the app at another file. Appends hold a lock
    for the whole read-modify-write cycle and replace the file with a rename.
    """

    def __init__(self, path: Optional[str] = None):
        self._path = path
        self._lock = threading.RLock()

    def init_app(self, app):
        """Registers the store on a Flask app"""
        app.extensions["stock_store"] = self

    @property
    def path(self) -> str:
        """Location of the XML file"""
        if self._path:
            return self._path
        return current_app.config["STOCKS_FILE"]

    def init_store(self, force: bool = False) -> bool:
        """Creates an empty collection file; returns True if one was written"""
        path = self.path
        with self._lock:
            if os.path.exists(path) and not force:
                return False
            logger.info("Creating empty stocks collection at %s", path)
            directory = os.path.dirname(path)
            if directory:
                try:
                    os.makedirs(directory, exist_ok=True)
                except OSError as error:
                    raise StorageWriteError(error) from error
            self._write(path, [])
        return True

    def list_records(self) -> List[Stock]:
        """Loads the collection and returns its stocks in stored order"""
        root = self._load(self.path)
        return [Stock.from_element(element) for element in root]

    def append_record(self, candidate: Stock) -> bool:
        """Appends a stock as the last element and rewrites the file"""
        path = self.path
        with self._lock:
            stocks = [Stock.from_element(element) for element in self._load(path)]
            stocks.append(candidate)
            self._write(path, stocks)
        logger.info("Stock %s appended, collection holds %d", candidate.title, len(stocks))
        return True

    ##################################################
    # File access
    ##################################################

    @staticmethod
    def _load(path: str) -> ET.Element:
        try:
            with open(path, "r", encoding="utf-8-sig") as xml_file:
                data = xml_file.read()
        except (OSError, UnicodeDecodeError) as error:
            logger.debug("Error reading stocks file %s: %s", path, error)
            raise StorageReadError(error) from error

        try:
            root = ET.fromstring(data)
        except ET.ParseError as error:
            logger.debug("Error parsing stocks file %s: %s", path, error)
            raise FormatError(error) from error

        if root.tag != ROOT_TAG:
            raise FormatError(f"Expected <{ROOT_TAG}> root element, found <{root.tag}>")
        return root

    @staticmethod
    def _write(path: str, stocks: List[Stock]):
        root = ET.Element(ROOT_TAG)
        root.extend(stock.to_element() for stock in stocks)
        tree = ET.ElementTree(root)
        ET.indent(tree)

        directory = os.path.dirname(os.path.abspath(path))
        tmp_path = None
        try:
            with tempfile.NamedTemporaryFile(
                "wb", dir=directory, prefix=".stocks-", suffix=".tmp", delete=False
            ) as tmp_file:
                tmp_path = tmp_file.name
                tree.write(tmp_file, encoding="utf-8", xml_declaration=True)
            if os.path.exists(path):
                # keep the permissions of the file being replaced
                os.chmod(tmp_path, stat.S_IMODE(os.stat(path).st_mode))
            os.replace(tmp_path, path)
        except (OSError, ValueError, TypeError) as error:
            logger.debug("Error writing stocks file %s: %s", path, error)
            if tmp_path and os.path.exists(tmp_path):
                os.remove(tmp_path)
            raise StorageWriteError(error) from error


# Store handle; registered on the app in service/__init__.py
store = StockStore()
