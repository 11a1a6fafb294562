# File: tests/integration/test_calendar_service.py
"""
Integration tests for GoogleCalendarService with a mocked API resource.
"""

import pytest
from unittest.mock import Mock
from googleapiclient.errors import HttpError

from calsync.models import UnauthenticatedError
from calsync.services.calendar_service import GoogleCalendarService

LA = "America/Los_Angeles"


def _list_mock(service_mock):
    return service_mock.events.return_value.list


class TestListEvents:

    def test_follows_page_tokens(self, mock_calendar_service, raw_timed_event, raw_all_day_event):
        _list_mock(mock_calendar_service).return_value.execute.side_effect = [
            {'items': [raw_timed_event], 'nextPageToken': 'page-2'},
            {'items': [raw_all_day_event]},
        ]

        events = GoogleCalendarService(mock_calendar_service).list_events("primary")

        assert [e['id'] for e in events] == ['raw_1', 'raw_2']
        calls = _list_mock(mock_calendar_service).call_args_list
        assert 'pageToken' not in calls[0].kwargs
        assert calls[1].kwargs['pageToken'] == 'page-2'
        assert calls[0].kwargs['singleEvents'] is False

    def test_skips_cancelled_events(self, mock_calendar_service, raw_timed_event):
        _list_mock(mock_calendar_service).return_value.execute.return_value = {
            'items': [raw_timed_event, {'id': 'gone', 'status': 'cancelled'}]
        }

        events = GoogleCalendarService(mock_calendar_service).list_events()

        assert [e['id'] for e in events] == ['raw_1']

    def test_passes_time_bounds(self, mock_calendar_service):
        GoogleCalendarService(mock_calendar_service).list_events(
            "work", time_min="2020-07-01T00:00:00Z", time_max="2020-08-01T00:00:00Z"
        )

        kwargs = _list_mock(mock_calendar_service).call_args.kwargs
        assert kwargs['calendarId'] == "work"
        assert kwargs['timeMin'] == "2020-07-01T00:00:00Z"
        assert kwargs['timeMax'] == "2020-08-01T00:00:00Z"

    def test_http_error_returns_empty_list(self, mock_calendar_service):
        _list_mock(mock_calendar_service).return_value.execute.side_effect = HttpError(
            resp=Mock(status=500, reason="Backend Error"), content=b"{}"
        )

        assert GoogleCalendarService(mock_calendar_service).list_events() == []


class TestImportEvents:

    def test_import_converts_events(self, mock_calendar_service, raw_timed_event,
                                    raw_all_day_event, user):
        _list_mock(mock_calendar_service).return_value.execute.return_value = {
            'items': [raw_timed_event, raw_all_day_event]
        }
        service = GoogleCalendarService(mock_calendar_service)

        converted = service.import_events(user, LA)

        assert [c.event_id for c in converted] == ['raw_1', 'raw_2']
        assert converted[1].task.due_date == "2020-07-03"
        assert converted[1].task.duration == 1440

        params = service.build_create_requests(converted)
        assert [p.name for p in params] == ['Design review', 'Holiday']
        assert all(p.labels == [] for p in params)

    def test_malformed_event_is_skipped(self, raw_all_day_event, user):
        bad = {'id': 'bad', 'start': {'date': 'not-a-date'}}

        converted = GoogleCalendarService(None).convert_events([bad, raw_all_day_event], user, LA)

        assert [c.event_id for c in converted] == ['raw_2']

    def test_non_object_entries_are_skipped(self, raw_all_day_event, user):
        raw_events = ["oops", None, 42, {'id': 'flat', 'start': '2020-07-01'}, raw_all_day_event]

        converted = GoogleCalendarService(None).convert_events(raw_events, user, LA)

        assert [c.event_id for c in converted] == ['raw_2']

    def test_non_object_attendee_is_skipped(self, raw_all_day_event, user):
        bad = {'id': 'bad', 'attendees': ['bob@example.com']}

        converted = GoogleCalendarService(None).convert_events([bad, raw_all_day_event], user, LA)

        assert [c.event_id for c in converted] == ['raw_2']

    def test_missing_user_fails_before_fetching(self, mock_calendar_service):
        with pytest.raises(UnauthenticatedError):
            GoogleCalendarService(mock_calendar_service).import_events(None, LA)

        _list_mock(mock_calendar_service).assert_not_called()

    def test_missing_user_fails_for_empty_batch(self):
        with pytest.raises(UnauthenticatedError):
            GoogleCalendarService(None).convert_events([], "", LA)
