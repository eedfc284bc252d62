"""
Endpoint groups exposed by OneSkyClient, one method per remote operation

Every method accepts an optional trailing callback(error, data) and returns
the APIResult of the call.
"""

import json
from pathlib import Path
from typing import Any, Callable, Dict, Mapping, Optional, Union

from .field_mapper import (
    STRING_INPUT_OPTIONS,
    STRING_TRANSLATE_FIELDS,
    STRING_OUTPUT_FIELDS,
    TRANSLATION_QUOTE_FIELDS,
    TRANSLATION_ORDER_FIELDS,
    PLATFORM_IMPORT_FIELDS,
    normalize_fields,
    normalize_string_records,
    normalize_delete_records,
    normalize_platform_ref,
    normalize_platform_settings,
    normalize_access_grants,
    serialize_locales,
)
from .response_normalizer import APIResult

Callback = Optional[Callable[[Any, Any], None]]


class EndpointGroup:
    """Base for a namespace of endpoint methods sharing the client's dispatch"""

    def __init__(self, client):
        self._client = client

    def _get(self, path: str, data: Dict[str, Any], callback: Callback) -> APIResult:
        return self._client.get(path, data, callback)

    def _post(self, path: str, data: Dict[str, Any], callback: Callback) -> APIResult:
        return self._client.post(path, data, callback)


class ProjectEndpoints(EndpointGroup):
    """Project Management API"""

    def platforms(self, project: Any, callback: Callback = None) -> APIResult:
        return self._get('project/platforms', {'project': project}, callback)

    def add(self, name: str, base_locale: str, callback: Callback = None) -> APIResult:
        return self._post('project/add', {'name': name, 'base-locale': base_locale}, callback)

    def details(self, project: Any, callback: Callback = None) -> APIResult:
        return self._get('project/details', {'project': project}, callback)

    def modify(self, project: Any, new_name: str, callback: Callback = None) -> APIResult:
        return self._post('project/modify', {'project': project, 'new-name': new_name}, callback)

    def delete(self, project: Any, callback: Callback = None) -> APIResult:
        return self._post('project/delete', {'project': project}, callback)


class StringEndpoints(EndpointGroup):
    """Translation I/O API"""

    def input(self, data: Any, strings: Any, callback: Callback = None) -> APIResult:
        """
        Add phrases to a platform

        Args:
            data: Platform id, or mapping of platform-id, version, tag
                and is-allow-update (camelCase accepted)
            strings: A string, a string record, or a sequence of either
            callback: Optional completion handler
        """
        post_data = {'input': json.dumps(normalize_string_records(strings))}
        if isinstance(data, Mapping):
            post_data.update(normalize_fields(data, STRING_INPUT_OPTIONS))
        elif data is not None:
            post_data['platform-id'] = data
        return self._post('string/input', post_data, callback)

    def translate(self, data: Mapping[str, Any], callback: Callback = None) -> APIResult:
        """Context is required when the phrase defines one"""
        return self._post('string/translate', normalize_fields(data, STRING_TRANSLATE_FIELDS), callback)

    def output(self, data: Mapping[str, Any], callback: Callback = None) -> APIResult:
        return self._post('string/output', normalize_fields(data, STRING_OUTPUT_FIELDS), callback)

    def delete(self, platform: Any, strings: Any, callback: Callback = None) -> APIResult:
        """
        Delete phrases from a platform

        Args:
            platform: Platform id, or mapping with platform id and version
            strings: A string key, a record, or a sequence of either
            callback: Optional completion handler
        """
        post_data = normalize_platform_ref(platform)
        post_data['to-delete'] = json.dumps(normalize_delete_records(strings))
        return self._post('string/delete', post_data, callback)

    def upload(self, platform: Any, file_path: Union[str, Path], file_format: str,
               callback: Callback = None) -> APIResult:
        """Upload a phrase file as multipart form data"""
        fields = normalize_platform_ref(platform)
        fields['format'] = file_format
        return self._client.upload('string/upload', fields, {'file': file_path}, callback)


class TranslateEndpoints(EndpointGroup):
    """Translation Order API"""

    def quote(self, data: Mapping[str, Any], callback: Callback = None) -> APIResult:
        return self._post('translate/quote', normalize_fields(data, TRANSLATION_QUOTE_FIELDS), callback)

    def order(self, data: Mapping[str, Any], callback: Callback = None) -> APIResult:
        return self._post('translate/order', normalize_fields(data, TRANSLATION_ORDER_FIELDS), callback)


class StringAccessEndpoints(EndpointGroup):
    """String Accessibility API"""

    def input(self, platform_id: Any, grants: Any, callback: Callback = None) -> APIResult:
        """Grant users access to strings; accepts one grant record or a sequence"""
        post_data = {
            'platform-id': platform_id,
            'input': json.dumps(normalize_access_grants(platform_id, grants))
        }
        return self._post('string-access/input', post_data, callback)

    def list_right(self, platform_id: Any, user_id: Any, callback: Callback = None) -> APIResult:
        return self._get('string-access/list-right',
                         {'platform-id': platform_id, 'user-id': user_id}, callback)

    def delete_by_user(self, platform_id: Any, user_id: Any, callback: Callback = None) -> APIResult:
        return self._post('string-access/delete-by-user',
                          {'platform-id': platform_id, 'user-id': user_id}, callback)

    def delete_by_string(self, platform_id: Any, string_key: str, callback: Callback = None) -> APIResult:
        return self._post('string-access/delete-by-string',
                          {'platform-id': platform_id, 'string-key': string_key}, callback)

    def delete_right(self, platform_id: Any, user_id: Any, string_key: str,
                     callback: Callback = None) -> APIResult:
        post_data = {
            'platform-id': platform_id,
            'user-id': user_id,
            'string-key': string_key
        }
        return self._post('string-access/delete-right', post_data, callback)


class PlatformEndpoints(EndpointGroup):
    """Platform Management API"""

    def details(self, platform_id: Any, callback: Callback = None) -> APIResult:
        return self._get('platform/details', {'platform-id': platform_id}, callback)

    def add(self, project_id: Any, data: Any, callback: Callback = None) -> APIResult:
        """
        Add a platform to a project

        Args:
            project_id: Project the platform belongs to
            data: Platform type, or mapping of type, description, thresholds
                and accessible-by
            callback: Optional completion handler
        """
        post_data = normalize_platform_settings(data)
        post_data['project'] = project_id
        return self._post('platform/add', post_data, callback)

    def modify(self, platform_id: Any, data: Any, callback: Callback = None) -> APIResult:
        post_data = normalize_platform_settings(data)
        post_data['platform-id'] = platform_id
        return self._post('platform/modify', post_data, callback)

    def locales(self, platform_id: Any, callback: Callback = None) -> APIResult:
        return self._post('platform/locales', {'platform-id': platform_id}, callback)

    def delete(self, platform_id: Any, callback: Callback = None) -> APIResult:
        return self._post('platform/delete', {'platform-id': platform_id}, callback)

    def import_(self, data: Mapping[str, Any], callback: Callback = None) -> APIResult:
        """Import phrases and translations into a platform from another one"""
        post_data = normalize_fields(data, PLATFORM_IMPORT_FIELDS)
        if 'locales' in post_data:
            post_data['locales'] = serialize_locales(post_data['locales'])
        return self._post('platform/import', post_data, callback)


class TranslatorEndpoints(EndpointGroup):
    """Translator API"""

    def contribution(self, platform_id: Any, email: str, locale: Optional[str] = None,
                     callback: Callback = None) -> APIResult:
        data = {'platform-id': platform_id, 'email': email}
        if locale:
            data['locale'] = locale
        return self._get('translator/contribution', data, callback)


class SSOEndpoints(EndpointGroup):
    """Single sign-on"""

    def get_link(self, unique_id: Any, name: str, callback: Callback = None) -> APIResult:
        return self._post('sso/get-link', {'unique-id': unique_id, 'name': name}, callback)
