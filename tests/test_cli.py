import json
from unittest.mock import MagicMock, patch

from click.testing import CliRunner

from discourse_api.cli import main
from discourse_api.errors import ServerError
from discourse_api.types import (
    Category,
    CategoryList,
    GetSiteBasicInfoResponse,
    ListCategoriesResponse,
    ListLatestTopicsResponse,
    TopicList,
    TopicListItem,
)

ENV = {"DISCOURSE_API_TOKEN": "cli-token", "DISCOURSE_HOST": "https://forum.example.com"}


def _basic_info() -> GetSiteBasicInfoResponse:
    return GetSiteBasicInfoResponse(
        logo_url="/logo.png",
        logo_small_url="/logo-small.png",
        apple_touch_icon_url="/icon.png",
        favicon_url="/favicon.ico",
        title="Example Forum",
        description="A place to talk",
        header_primary_color="333333",
        header_background_color="ffffff",
        login_required=False,
        locale="en",
        include_in_discourse_discover=False,
        mobile_logo_url="/mobile.png",
    )


def _latest() -> ListLatestTopicsResponse:
    topic = TopicListItem(
        id=9, title="Hello", fancy_title="Hello", slug="hello", posts_count=2, reply_count=1,
        highest_post_number=2, created_at="2024-01-01T00:00:00Z", archetype="regular",
        views=42, last_poster_username="sam",
    )
    return ListLatestTopicsResponse(topic_list=TopicList(topics=[topic]))


def _mock_client(MockClient) -> MagicMock:
    client = MagicMock()
    MockClient.from_settings.return_value = client
    return client


class TestCliSiteInfo:
    @patch("discourse_api.cli.Client")
    def test_json_output(self, MockClient):
        client = _mock_client(MockClient)
        client.site.return_value.get_basic_info.return_value = _basic_info()

        runner = CliRunner()
        result = runner.invoke(main, ["site-info"], env=ENV)

        assert result.exit_code == 0
        assert json.loads(result.output)["title"] == "Example Forum"
        settings = MockClient.from_settings.call_args.args[0]
        assert settings.token == "cli-token"
        assert settings.host == "https://forum.example.com"

    @patch("discourse_api.cli.Client")
    def test_table_output(self, MockClient):
        client = _mock_client(MockClient)
        client.site.return_value.get_basic_info.return_value = _basic_info()

        runner = CliRunner()
        result = runner.invoke(main, ["--format", "table", "site-info"], env=ENV)

        assert result.exit_code == 0
        lines = result.output.splitlines()
        assert lines[0].split() == ["title", "description", "locale", "login_required"]
        assert lines[2].startswith("Example Forum")
        assert lines[2].endswith("False")


class TestCliLatest:
    @patch("discourse_api.cli.Client")
    def test_table_lists_topics(self, MockClient):
        client = _mock_client(MockClient)
        client.topics.return_value.list_latest.return_value = _latest()

        runner = CliRunner()
        result = runner.invoke(main, ["--format", "table", "latest", "--per-page", "5", "--order", "views"], env=ENV)

        assert result.exit_code == 0
        client.topics.return_value.list_latest.assert_called_once_with(order="views", per_page=5)
        assert "Hello" in result.output
        assert "'sam'" in result.output

    @patch("discourse_api.cli.Client")
    def test_server_error_exits_nonzero(self, MockClient):
        client = _mock_client(MockClient)
        client.topics.return_value.list_latest.side_effect = ServerError("forbidden", 403)

        runner = CliRunner()
        result = runner.invoke(main, ["latest"], env=ENV)

        assert result.exit_code == 1
        assert "Server Error: 403 forbidden" in result.output


class TestCliCategories:
    @patch("discourse_api.cli.Client")
    def test_include_subcategories(self, MockClient):
        client = _mock_client(MockClient)
        client.categories.return_value.list.return_value = ListCategoriesResponse(
            category_list=CategoryList(
                can_create_category=False,
                can_create_topic=True,
                categories=[Category(id=1, name="General", slug="general")],
            )
        )

        runner = CliRunner()
        result = runner.invoke(main, ["--format", "table", "categories", "--include-subcategories"], env=ENV)

        assert result.exit_code == 0
        client.categories.return_value.list.assert_called_once_with(include_subcategories=True)
        assert "General" in result.output

    @patch("discourse_api.cli.Client")
    def test_empty_table(self, MockClient):
        client = _mock_client(MockClient)
        client.categories.return_value.list.return_value = ListCategoriesResponse(
            category_list=CategoryList(can_create_category=False, can_create_topic=False, categories=[])
        )

        runner = CliRunner()
        result = runner.invoke(main, ["--format", "table", "categories"], env=ENV)

        assert result.exit_code == 0
        assert "(no results)" in result.output
        client.categories.return_value.list.assert_called_once_with(include_subcategories=None)


class TestCliArguments:
    @patch("discourse_api.cli.Client")
    def test_topic_user_and_search(self, MockClient):
        client = _mock_client(MockClient)
        client.topics.return_value.get.return_value = _basic_info()
        client.users.return_value.get.return_value = _basic_info()
        client.search.return_value.search.return_value = _basic_info()

        runner = CliRunner()
        assert runner.invoke(main, ["topic", "9"], env=ENV).exit_code == 0
        assert runner.invoke(main, ["user", "sam"], env=ENV).exit_code == 0
        assert runner.invoke(main, ["search", "api docs", "--page", "2"], env=ENV).exit_code == 0

        client.topics.return_value.get.assert_called_once_with("9")
        client.users.return_value.get.assert_called_once_with("sam")
        client.search.return_value.search.assert_called_once_with(page=2, q="api docs")


class TestCliConfig:
    @patch("discourse_api.cli.Client")
    def test_config_file(self, MockClient, tmp_path):
        client = _mock_client(MockClient)
        client.site.return_value.get_basic_info.return_value = _basic_info()
        config = tmp_path / "discourse.yaml"
        config.write_text("token: file-token\nhost: https://meta.discourse.org\n")

        runner = CliRunner()
        result = runner.invoke(main, ["--config", str(config), "site-info"], env={"DISCOURSE_API_TOKEN": "", "DISCOURSE_HOST": ""})

        assert result.exit_code == 0
        settings = MockClient.from_settings.call_args.args[0]
        assert settings.token == "file-token"
        assert settings.host == "https://meta.discourse.org"

    def test_missing_token(self):
        runner = CliRunner()
        result = runner.invoke(main, ["site-info"], env={"DISCOURSE_API_TOKEN": "", "DISCOURSE_CONFIG": ""})

        assert result.exit_code == 1
        assert "Invalid Request" in result.output
