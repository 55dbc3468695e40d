"""
Unit tests for getWeekTasks
"""

import json
from unittest.mock import call

import pytest

from clickup_mcp.tools.tasks import GetWeekTasksTool

# 2025-05-05 00:00:00 SGT
MAY_5_SGT_MS = 1746374400000
HOUR_MS = 3_600_000
DAY_MS = 86_400_000

ARGS = {
    "list_id": "901",
    "start_date": "5 May 2025",
    "end_date": "11 May 2025",
    "assignee_username": "ANA",
}


def task(task_id, closed, username="ana.lim", parent=None, status="complete"):
    return {
        "id": task_id,
        "name": f"Task {task_id}",
        "date_closed": closed,
        "assignees": [{"username": username}] if username else [],
        "status": {"status": status},
        "parent": parent,
    }


def page_call(page):
    return call(
        "list/901/task",
        "GET",
        "pk_test",
        params={"archived": False, "subtasks": True, "include_closed": True, "page": page},
    )


class TestGetWeekTasksTool:
    """Tests for the closed-task aggregator."""

    @pytest.mark.asyncio
    async def test_collects_matches_across_pages(self, mock_context):
        mock_context.client.invoke.side_effect = [
            {
                "tasks": [
                    task("a", str(MAY_5_SGT_MS + 15 * HOUR_MS)),
                    task("b", MAY_5_SGT_MS - 1),
                    task("c", MAY_5_SGT_MS + HOUR_MS, username="bob"),
                    task("d", None),
                ],
                "last_page": False,
            },
            {
                "tasks": [task("e", MAY_5_SGT_MS + 7 * DAY_MS - 1, parent="a")],
                "last_page": True,
            },
        ]

        result = await GetWeekTasksTool(mock_context)(ARGS)

        assert json.loads(result[0].text) == [
            {
                "id": "a",
                "name": "Task a",
                "date_closed": "05/05/2025, 03:00:00 pm",
                "assignee": "ana.lim",
                "status": "complete",
                "parent_task_id": None,
            },
            {
                "id": "e",
                "name": "Task e",
                "date_closed": "11/05/2025, 11:59:59 pm",
                "assignee": "ana.lim",
                "status": "complete",
                "parent_task_id": "a",
            },
        ]
        assert mock_context.client.invoke.await_args_list == [page_call(0), page_call(1)]

    @pytest.mark.asyncio
    async def test_page_without_matches_stops_walk(self, mock_context):
        mock_context.client.invoke.side_effect = [
            {"tasks": [task("a", MAY_5_SGT_MS, username="bob")], "last_page": False},
            {"tasks": [task("b", MAY_5_SGT_MS)], "last_page": True},
        ]

        result = await GetWeekTasksTool(mock_context)(ARGS)

        assert result[0].text == "[]"
        assert mock_context.client.invoke.await_count == 1

    @pytest.mark.asyncio
    async def test_matches_on_last_page_are_kept(self, mock_context):
        mock_context.client.invoke.return_value = {
            "tasks": [task("a", MAY_5_SGT_MS)],
            "last_page": True,
        }

        result = await GetWeekTasksTool(mock_context)(ARGS)

        assert [row["id"] for row in json.loads(result[0].text)] == ["a"]
        assert mock_context.client.invoke.await_args_list == [page_call(0)]

    @pytest.mark.asyncio
    async def test_missing_assignee_never_matches_non_empty_fragment(self, mock_context):
        mock_context.client.invoke.return_value = {
            "tasks": [task("a", MAY_5_SGT_MS, username=None)],
            "last_page": True,
        }

        result = await GetWeekTasksTool(mock_context)(ARGS)

        assert result[0].text == "[]"

    @pytest.mark.asyncio
    async def test_error_message(self, mock_context):
        mock_context.client.invoke.return_value = {"error": {"message": "Rate limited"}, "status": 429}

        result = await GetWeekTasksTool(mock_context)(ARGS)

        assert result[0].text == "Error fetching tasks: Rate limited"

    @pytest.mark.asyncio
    async def test_error_without_message_is_serialized(self, mock_context):
        mock_context.client.invoke.return_value = {"error": {"err": "Team not authorized"}, "status": 401}

        result = await GetWeekTasksTool(mock_context)(ARGS)

        assert result[0].text == 'Error fetching tasks: {"err":"Team not authorized"}'

    @pytest.mark.asyncio
    async def test_tasks_not_a_list(self, mock_context):
        mock_context.client.invoke.return_value = {"unexpected": True}

        result = await GetWeekTasksTool(mock_context)(ARGS)

        assert result[0].text == 'Error fetching tasks: {"unexpected":true}'

    @pytest.mark.asyncio
    async def test_unparseable_date(self, mock_context):
        result = await GetWeekTasksTool(mock_context)({**ARGS, "end_date": "zzzz"})

        assert result[0].text == "Error: could not parse date 'zzzz'"
        mock_context.client.invoke.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_argument(self, mock_context):
        args = dict(ARGS)
        del args["assignee_username"]

        result = await GetWeekTasksTool(mock_context)(args)

        assert json.loads(result[0].text)["type"] == "ValidationError"
        mock_context.client.invoke.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_stops_on_zero_match_page_after_matches(self, mock_context):
        mock_context.client.invoke.side_effect = [
            {"tasks": [task("a", MAY_5_SGT_MS)], "last_page": False},
            {"tasks": [task("b", MAY_5_SGT_MS, username="bob")], "last_page": False},
            {"tasks": [task("c", MAY_5_SGT_MS)], "last_page": True},
        ]

        result = await GetWeekTasksTool(mock_context)(ARGS)

        assert [t["id"] for t in json.loads(result[0].text)] == ["a"]
        assert mock_context.client.invoke.await_args_list == [page_call(0), page_call(1)]
