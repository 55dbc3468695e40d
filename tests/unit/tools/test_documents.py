"""
Unit tests for document tools
"""

import pytest

from clickup_mcp.tools.documents import (
    CreateDocTool,
    DocPagesResource,
    DocResource,
    DocsResource,
    GetDocPagesTool,
    GetDocTool,
    SearchDocsTool,
)


class TestSearchDocsTool:
    """Tests for searchDocs."""

    @pytest.mark.asyncio
    async def test_defaults(self, mock_context):
        await SearchDocsTool(mock_context)({"workspaceId": 42})

        mock_context.client.invoke.assert_awaited_once_with(
            "/v3/workspaces/42/docs",
            "GET",
            "pk_test",
            params={
                "id": None,
                "creator": None,
                "deleted": False,
                "archived": False,
                "parent_id": None,
                "parent_type": None,
                "limit": 50,
                "next_cursor": None,
            },
        )

    @pytest.mark.asyncio
    async def test_filters_and_empty_strings(self, mock_context):
        await SearchDocsTool(mock_context)({
            "workspaceId": 42,
            "id": "",
            "creator": 0,
            "archived": True,
            "parent_id": "p1",
            "parent_type": "SPACE",
            "limit": 10,
            "next_cursor": "cur",
        })

        params = mock_context.client.invoke.await_args.kwargs["params"]
        assert params["id"] is None
        assert params["creator"] == 0
        assert params["deleted"] is False
        assert params["archived"] is True
        assert params["parent_id"] == "p1"
        assert params["parent_type"] == "SPACE"
        assert params["limit"] == 10
        assert params["next_cursor"] == "cur"


class TestCreateDocTool:
    """Tests for createDoc."""

    @pytest.mark.asyncio
    async def test_title_only(self, mock_context):
        await CreateDocTool(mock_context)({"workspaceId": "42", "title": "Notes", "content": ""})

        mock_context.client.invoke.assert_awaited_once_with(
            "team/42/doc", "POST", "pk_test", {"title": "Notes"}
        )

    @pytest.mark.asyncio
    async def test_with_content_and_parent(self, mock_context):
        await CreateDocTool(mock_context)({
            "workspaceId": "42",
            "title": "Notes",
            "content": "# Hi",
            "parentDoc": "d0",
        })

        mock_context.client.invoke.assert_awaited_once_with(
            "team/42/doc", "POST", "pk_test", {"title": "Notes", "content": "# Hi", "parentDoc": "d0"}
        )


class TestDocReads:
    """Tests for getDoc and getDocPages."""

    @pytest.mark.asyncio
    async def test_get_doc(self, mock_context):
        await GetDocTool(mock_context)({"workspaceId": 42, "docId": "d1"})
        mock_context.client.invoke.assert_awaited_once_with(
            "/v3/workspaces/42/docs/d1", "GET", "pk_test"
        )

    @pytest.mark.asyncio
    async def test_get_doc_pages_defaults(self, mock_context):
        await GetDocPagesTool(mock_context)({"workspaceId": 42, "docId": "d1"})
        mock_context.client.invoke.assert_awaited_once_with(
            "/v3/workspaces/42/docs/d1/pages",
            "GET",
            "pk_test",
            params={"max_page_depth": -1, "content_format": "text/md"},
        )

    @pytest.mark.asyncio
    async def test_get_doc_pages_options(self, mock_context):
        await GetDocPagesTool(mock_context)({
            "workspaceId": 42,
            "docId": "d1",
            "max_page_depth": 2,
            "content_format": "text/plain",
        })
        assert mock_context.client.invoke.await_args.kwargs["params"] == {
            "max_page_depth": 2,
            "content_format": "text/plain",
        }


class TestDocResources:
    """Tests for document resources."""

    @pytest.mark.asyncio
    async def test_docs_resource(self, mock_context):
        resource = DocsResource(mock_context)
        await resource.read("clickup://workspace/42/docs", resource.match("clickup://workspace/42/docs"))
        mock_context.client.invoke.assert_awaited_once_with("/v3/workspaces/42/docs", "GET", "pk_test")

    @pytest.mark.asyncio
    async def test_doc_resource(self, mock_context):
        resource = DocResource(mock_context)
        variables = resource.match("clickup://workspace/42/doc/d1")

        await resource.read("clickup://workspace/42/doc/d1", variables)

        assert variables == {"workspace_id": "42", "doc_id": "d1"}
        mock_context.client.invoke.assert_awaited_once_with(
            "/v3/workspaces/42/docs/d1", "GET", "pk_test"
        )

    @pytest.mark.asyncio
    async def test_doc_pages_resource(self, mock_context):
        resource = DocPagesResource(mock_context)
        uri = "clickup://workspace/42/doc/d1/pages"

        await resource.read(uri, resource.match(uri))

        mock_context.client.invoke.assert_awaited_once_with(
            "/v3/workspaces/42/docs/d1/pages",
            "GET",
            "pk_test",
            params={"max_page_depth": -1, "content_format": "text/md"},
        )
