"""
Loaders for canonical e-invoice documents stored as JSON
"""

import json
from pathlib import Path
from typing import Dict, List, Union

from models.invoice import EInvoiceDocument


class DocumentLoader:
    """Load canonical documents from a JSON file or a directory of JSON files"""

    def __init__(self, data_dir: Union[str, Path] = "data"):
        self.data_dir = Path(data_dir)

    def load_file(self, path: Union[str, Path]) -> EInvoiceDocument:
        """Load one document; raises FileNotFoundError, JSONDecodeError or pydantic ValidationError"""
        with open(path, encoding='utf-8') as f:
            payload = json.load(f)
        return EInvoiceDocument.model_validate(payload)

    def document_files(self) -> List[Path]:
        if not self.data_dir.is_dir():
            raise FileNotFoundError(f"Document directory not found: {self.data_dir}")
        return sorted(self.data_dir.glob("*.json"))

    def load_all(self) -> Dict[str, EInvoiceDocument]:
        """Load every *.json document in the directory, keyed by file name"""
        return {path.name: self.load_file(path) for path in self.document_files()}
