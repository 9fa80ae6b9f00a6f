"""
XML summary sink.

Output shape::

    <?xml version='1.0' encoding='utf-8'?>
    <entities>
      <entity name="lib/app.jar">
        <MD5>...</MD5>
        <SHA-1>...</SHA-1>
      </entity>
    </entities>
"""

from __future__ import annotations

import xml.etree.ElementTree as ET

from .summary import SummarySink


class XmlSummarySink(SummarySink):
    """One <entity> element per entity, one child element per algorithm."""

    name = "xml-summary"

    def build_document(self) -> ET.ElementTree:
        root = ET.Element("entities")
        for entity, cells in self._rows.values():
            element = ET.SubElement(root, "entity", name=entity.logical_name)
            if entity.classifier:
                element.set("classifier", entity.classifier)
            for column in self._columns:
                if column in cells:
                    ET.SubElement(element, column).text = cells[column]
        ET.indent(root)
        return ET.ElementTree(root)

    def _write(self) -> None:
        self.build_document().write(self._path, encoding=self._encoding, xml_declaration=True)
