"""
FieldMapper module for translating permissive caller input into OneSky wire fields

Each endpoint category declares its accepted fields as an alias table. A field
is read from its canonical hyphenated key first and from its camelCase alias
only when the canonical key is absent. Fields resolving to None are dropped.
"""

from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional, Tuple


@dataclass(frozen=True)
class FieldAlias:
    """Canonical wire field name and its optional camelCase alias"""
    canonical: str
    alias: Optional[str] = None

    @property
    def names(self) -> Tuple[str, ...]:
        return (self.canonical, self.alias) if self.alias else (self.canonical,)


AliasTable = Tuple[FieldAlias, ...]

PLATFORM_ID = FieldAlias('platform-id', 'platformId')
STRING_KEY = FieldAlias('string-key', 'stringKey')

# Translation I/O
STRING_INPUT_OPTIONS: AliasTable = (
    PLATFORM_ID,
    FieldAlias('version'),
    FieldAlias('tag'),
    FieldAlias('is-allow-update', 'isAllowUpdate'),
)
STRING_TRANSLATE_FIELDS: AliasTable = (
    PLATFORM_ID,
    STRING_KEY,
    FieldAlias('context'),
    FieldAlias('locale'),
    FieldAlias('translation'),
)
STRING_OUTPUT_FIELDS: AliasTable = (
    PLATFORM_ID,
    FieldAlias('locale'),
    FieldAlias('tag'),
    FieldAlias('md5'),
    FieldAlias('version'),
    FieldAlias('is-fallback', 'isFallback'),
)
STRING_RECORD_FIELDS: AliasTable = (STRING_KEY,)
PLATFORM_REF_FIELDS: AliasTable = (PLATFORM_ID,)

# Translation orders
TRANSLATION_QUOTE_FIELDS: AliasTable = (
    PLATFORM_ID,
    FieldAlias('version'),
    FieldAlias('from-locale', 'fromLocale'),
    FieldAlias('to-locale', 'toLocale'),
    FieldAlias('filter'),
)
TRANSLATION_ORDER_FIELDS: AliasTable = (
    PLATFORM_ID,
    FieldAlias('version'),
    FieldAlias('agency-id', 'agencyId'),
    FieldAlias('from-locale', 'fromLocale'),
    FieldAlias('to-locale', 'toLocale'),
    FieldAlias('filter'),
)

# String-access grants
ACCESS_GRANT_FIELDS: AliasTable = (
    PLATFORM_ID,
    FieldAlias('user-id', 'userId'),
    STRING_KEY,
    FieldAlias('timestamp'),
)

# Platforms
PLATFORM_SETTINGS_FIELDS: AliasTable = (
    FieldAlias('string-publish-threshold', 'stringPublishThreshold'),
    FieldAlias('string-confirm-threshold', 'stringConfirmThreshold'),
    FieldAlias('accessible-by', 'accessibleBy'),
    FieldAlias('type'),
    FieldAlias('description'),
)
PLATFORM_IMPORT_FIELDS: AliasTable = (
    PLATFORM_ID,
    FieldAlias('from-platform-id', 'fromPlatformId'),
    FieldAlias('locales'),
)


def resolve_field(raw: Mapping[str, Any], field: FieldAlias) -> Any:
    """Canonical key wins; the alias is consulted only when it is unset"""
    value = raw.get(field.canonical)
    if value is None and field.alias is not None:
        value = raw.get(field.alias)
    return value


def normalize_fields(raw: Optional[Mapping[str, Any]], alias_table: AliasTable,
                     passthrough: bool = False) -> Dict[str, Any]:
    """
    Map caller input onto canonical wire field names

    Args:
        raw: Caller supplied mapping, may be None
        alias_table: Fields accepted by the endpoint
        passthrough: Keep keys the table does not know about

    Returns:
        New dictionary keyed by canonical names, without None values
    """
    raw = raw or {}
    known = {name for field in alias_table for name in field.names}

    result: Dict[str, Any] = {}
    if passthrough:
        result.update((key, value) for key, value in raw.items()
                      if key not in known and value is not None)

    for field in alias_table:
        value = resolve_field(raw, field)
        if value is not None:
            result[field.canonical] = value
    return result


def is_collection(value: Any) -> bool:
    """Any iterable except text and mappings, which count as single items"""
    return isinstance(value, Iterable) and not isinstance(value, (str, bytes, Mapping))


def as_sequence(value: Any) -> List[Any]:
    """Treat a single item as a one-element sequence"""
    if value is None:
        return []
    if is_collection(value):
        return list(value)
    return [value]


def normalize_string_records(strings: Any) -> List[Dict[str, Any]]:
    """
    Shape the strings argument of a string input call

    Accepts a string, a record, or a sequence of either. Records without a
    string key get their own text as key, since OneSky cannot delete
    phrases that have none.
    """
    records = []
    for item in as_sequence(strings):
        if not isinstance(item, Mapping):
            item = {'string': item}
        record = normalize_fields(item, STRING_RECORD_FIELDS, passthrough=True)
        if not record.get('string-key') and record.get('string') is not None:
            record['string-key'] = record['string']
        records.append(record)
    return records


def normalize_delete_records(strings: Any) -> List[Dict[str, Any]]:
    """Shape the strings argument of a delete call into key-only records"""
    records = []
    for item in as_sequence(strings):
        if not isinstance(item, Mapping):
            item = {'string-key': item}
        records.append(normalize_fields(item, STRING_RECORD_FIELDS, passthrough=True))
    return records


def normalize_platform_ref(platform: Any) -> Dict[str, Any]:
    """A bare platform id, or a mapping exposing platformId/platform-id"""
    if isinstance(platform, Mapping):
        return normalize_fields(platform, PLATFORM_REF_FIELDS, passthrough=True)
    if platform is None:
        return {}
    return {'platform-id': platform}


def normalize_platform_settings(data: Any) -> Dict[str, Any]:
    """A bare platform type, or a mapping of optional platform settings"""
    if isinstance(data, Mapping):
        return normalize_fields(data, PLATFORM_SETTINGS_FIELDS)
    if data is None:
        return {}
    return {'type': data}


def serialize_locales(locales: Any) -> Any:
    if is_collection(locales):
        return ','.join(str(locale) for locale in locales)
    return locales


def normalize_access_grants(platform_id: Any, grants: Any) -> List[Dict[str, Any]]:
    """
    Shape string-access grants, each falling back to the given platform id

    Args:
        platform_id: Platform the grants apply to unless a record says otherwise
        grants: A single grant record or a sequence of them

    Returns:
        List of grant records with canonical field names
    """
    records = []
    for grant in as_sequence(grants):
        if not isinstance(grant, Mapping):
            continue
        record = normalize_fields(grant, ACCESS_GRANT_FIELDS)
        if platform_id is not None:
            record.setdefault('platform-id', platform_id)
        records.append(record)
    return records
