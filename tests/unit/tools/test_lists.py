"""
Unit tests for list tools
"""

import pytest

from clickup_mcp.tools.lists import (
    CreateListTool,
    DeleteListTool,
    FolderListsResource,
    GetFolderlessListTool,
    GetListsTool,
    GetListTool,
    ListResource,
    SpaceListsResource,
    UpdateListTool,
)


class TestListTools:
    """Tests for list CRUD tools."""

    @pytest.mark.asyncio
    async def test_get_lists(self, mock_context):
        await GetListsTool(mock_context)({"folderId": "f1"})
        mock_context.client.invoke.assert_awaited_once_with("folder/f1/list", "GET", "pk_test")

    @pytest.mark.asyncio
    async def test_create_list_without_content(self, mock_context):
        await CreateListTool(mock_context)({"folderId": "f1", "name": "Backlog"})
        mock_context.client.invoke.assert_awaited_once_with(
            "folder/f1/list", "POST", "pk_test", {"name": "Backlog"}
        )

    @pytest.mark.asyncio
    async def test_create_list_with_content(self, mock_context):
        await CreateListTool(mock_context)({"folderId": "f1", "name": "Backlog", "content": "Later"})
        mock_context.client.invoke.assert_awaited_once_with(
            "folder/f1/list", "POST", "pk_test", {"name": "Backlog", "content": "Later"}
        )

    @pytest.mark.asyncio
    async def test_get_folderless_list(self, mock_context):
        await GetFolderlessListTool(mock_context)({"spaceId": "s1"})
        mock_context.client.invoke.assert_awaited_once_with("space/s1/list", "GET", "pk_test")

    @pytest.mark.asyncio
    async def test_get_list(self, mock_context):
        await GetListTool(mock_context)({"listId": "l1"})
        mock_context.client.invoke.assert_awaited_once_with("list/l1", "GET", "pk_test")

    @pytest.mark.asyncio
    async def test_update_list_renames_fields(self, mock_context):
        await UpdateListTool(mock_context)({
            "listId": "l1",
            "name": "Sprint",
            "dueDate": 1746374400000,
            "dueDateTime": False,
            "unsetStatus": True,
        })

        mock_context.client.invoke.assert_awaited_once_with(
            "list/l1",
            "PUT",
            "pk_test",
            {
                "name": "Sprint",
                "due_date": 1746374400000,
                "due_date_time": False,
                "unset_status": True,
            },
        )

    @pytest.mark.asyncio
    async def test_delete_list(self, mock_context):
        await DeleteListTool(mock_context)({"listId": "l1"})
        mock_context.client.invoke.assert_awaited_once_with("list/l1", "DELETE", "pk_test")


class TestListResources:
    """Tests for list resources."""

    @pytest.mark.asyncio
    async def test_list_resource(self, mock_context):
        resource = ListResource(mock_context)
        await resource.read("clickup://list/l1", resource.match("clickup://list/l1"))
        mock_context.client.invoke.assert_awaited_once_with("list/l1", "GET", "pk_test")

    @pytest.mark.asyncio
    async def test_folder_lists_resource(self, mock_context):
        resource = FolderListsResource(mock_context)
        await resource.read("clickup://folder/f1/lists", resource.match("clickup://folder/f1/lists"))
        mock_context.client.invoke.assert_awaited_once_with("folder/f1/list", "GET", "pk_test")

    @pytest.mark.asyncio
    async def test_space_lists_resource(self, mock_context):
        resource = SpaceListsResource(mock_context)
        await resource.read("clickup://space/s1/lists", resource.match("clickup://space/s1/lists"))
        mock_context.client.invoke.assert_awaited_once_with("space/s1/list", "GET", "pk_test")
