"""
CSDL ($metadata) parser that turns entity types into entity definitions.
"""

import sys
from datetime import datetime
from typing import Dict, List, Union

from lxml import etree

from .constants import EDM_TYPE_MAP
from .models import EntityDefinition, FieldDefinition, NavigationProperty
from .registry import EntityRegistry


def _local_name(qualified: str) -> str:
    """Strip namespace and Collection(...) wrapper: Collection(NS.type) -> type."""
    if qualified.startswith("Collection(") and qualified.endswith(")"):
        qualified = qualified[len("Collection("):-1]
    return qualified.split(".")[-1]


class MetadataParser:
    """Parses an OData v4 metadata document into EntityDefinitions.

    Namespaces are matched by local name so documents from any schema
    namespace (Microsoft.NAV, custom publishers) are handled alike.
    """

    def __init__(self, verbose: bool = False):
        self.verbose = verbose
        # No DTD or entity resolution for documents fetched over the network
        self._xml_parser = etree.XMLParser(resolve_entities=False, no_network=True, huge_tree=False)

    def _log_verbose(self, message: str):
        """Prints message to stderr only if verbose mode is enabled."""
        if self.verbose:
            timestamp = datetime.now().strftime('%Y-%m-%d %H:%M:%S.%f')[:-3]
            print(f"[{timestamp} Parser VERBOSE] {message}", file=sys.stderr)

    def parse(self, xml: Union[str, bytes]) -> List[EntityDefinition]:
        if isinstance(xml, str):
            xml = xml.encode("utf-8")
        try:
            root = etree.fromstring(xml, parser=self._xml_parser)
        except etree.XMLSyntaxError as e:
            print(f"ERROR: Failed to parse metadata XML: {e}", file=sys.stderr)
            raise ValueError(f"Invalid metadata document: {e}") from e

        entity_sets = self._parse_entity_sets(root)
        entities = []
        for et_elem in root.xpath("//*[local-name()='Schema']/*[local-name()='EntityType']"):
            entity = self._parse_entity_type(et_elem, entity_sets)
            if entity is not None:
                entities.append(entity)

        self._log_verbose(f"Parsed {len(entities)} entity types from metadata")
        return entities

    def _parse_entity_sets(self, root) -> Dict[str, str]:
        """Map entity type name -> entity set name."""
        entity_sets = {}
        for es_elem in root.xpath("//*[local-name()='EntityContainer']/*[local-name()='EntitySet']"):
            name = es_elem.get("Name")
            type_fqn = es_elem.get("EntityType")
            if not name or not type_fqn:
                continue
            entity_sets[_local_name(type_fqn)] = name
        return entity_sets

    def _parse_entity_type(self, et_elem, entity_sets: Dict[str, str]):
        type_name = et_elem.get("Name")
        if not type_name:
            return None
        plural_name = entity_sets.get(type_name, type_name + "s")

        key_names = set(et_elem.xpath("./*[local-name()='Key']/*[local-name()='PropertyRef']/@Name"))

        fields = []
        for prop_elem in et_elem.xpath("./*[local-name()='Property']"):
            name = prop_elem.get("Name")
            edm_type = prop_elem.get("Type")
            if not name or not edm_type:
                continue
            max_length = prop_elem.get("MaxLength")
            fields.append(FieldDefinition(
                name=name,
                type=EDM_TYPE_MAP.get(edm_type, "string"),
                read_only=name in key_names,
                description=f"{name} field ({edm_type}).",
                max_length=int(max_length) if max_length and max_length.isdigit() else None,
            ))

        navigation_properties = []
        for nav_elem in et_elem.xpath("./*[local-name()='NavigationProperty']"):
            nav_name = nav_elem.get("Name")
            nav_type = nav_elem.get("Type")
            if not nav_name or not nav_type:
                continue
            target = _local_name(nav_type)
            navigation_properties.append(NavigationProperty(
                name=nav_name,
                target_entity=target,
                is_collection=nav_type.startswith("Collection("),
                description=f"Navigation to {target}.",
            ))

        return EntityDefinition(
            name=type_name,
            plural_name=plural_name,
            api_path=plural_name,
            description=f"{type_name} entity discovered from API metadata.",
            fields=fields,
            navigation_properties=navigation_properties,
        )


def parse_metadata(xml: Union[str, bytes], verbose: bool = False) -> List[EntityDefinition]:
    return MetadataParser(verbose=verbose).parse(xml)


def select_new_entities(registry: EntityRegistry, discovered: List[EntityDefinition]) -> List[EntityDefinition]:
    """Entities not yet known by name, so discovery never overrides curated definitions."""
    return [e for e in discovered if e.name not in registry]
