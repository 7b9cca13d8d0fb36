import pytest

from team_invites.domain.models.team import Team
from team_invites.domain.exceptions import ValidationError


@pytest.mark.asyncio
async def test_save_team_assigns_distinct_ids(team_service):
    ids = set()
    for i in range(50):
        team = await team_service.save_team(Team(token=f"t{i}", account_id=f"a{i}", name=f"n{i}"))
        assert team.id
        assert team.id not in ids
        ids.add(team.id)

    assert len(await team_service.list_teams()) == 50


@pytest.mark.asyncio
async def test_list_teams_sorted_by_name_with_empty_name_first(team_service):
    await team_service.save_team(Team(token="t", account_id="a", name="Charlie"))
    await team_service.save_team(Team(token="t", account_id="a", name="Alpha"))
    await team_service.save_team(Team(token="t", account_id="a", name=""))
    await team_service.save_team(Team(token="t", account_id="a", name="Bravo"))

    names = [t.name for t in await team_service.list_teams()]

    assert names == ["", "Alpha", "Bravo", "Charlie"]


@pytest.mark.asyncio
async def test_delete_team_is_idempotent(team_service):
    team = await team_service.save_team(Team(token="t", account_id="a", name="Alpha"))

    await team_service.delete_team(team.id)
    assert team.id not in [t.id for t in await team_service.list_teams()]

    await team_service.delete_team(team.id)
    await team_service.delete_team("never-existed")
    assert await team_service.list_teams() == []


@pytest.mark.asyncio
async def test_save_team_with_existing_id_replaces_record(team_service):
    team = await team_service.save_team(Team(token="t1", account_id="a1", name="Alpha"))

    replaced = await team_service.save_team(Team(id=team.id, token="t2", account_id="a2", name="Alpha 2"))

    teams = await team_service.list_teams()
    assert replaced.id == team.id
    assert len(teams) == 1
    assert teams[0].token == "t2"
    assert teams[0].account_id == "a2"
    assert teams[0].name == "Alpha 2"


@pytest.mark.asyncio
@pytest.mark.parametrize("token,account_id", [("", "a"), ("t", ""), ("", "")])
async def test_save_team_requires_token_and_account_id(team_service, repo, token, account_id):
    with pytest.raises(ValidationError):
        await team_service.save_team(Team(token=token, account_id=account_id, name="Bad"))

    assert repo.entries == {}


@pytest.mark.asyncio
async def test_list_teams_orders_mixed_case_names_case_insensitively(team_service):
    for name in ["Beta", "alpha", "Alpha", "beta", ""]:
        await team_service.save_team(Team(token="t", account_id="a", name=name))

    names = [t.name for t in await team_service.list_teams()]

    assert names == ["", "alpha", "Alpha", "beta", "Beta"]
