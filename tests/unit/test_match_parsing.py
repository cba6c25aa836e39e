"""Unit tests for raw match-v5 parsing."""
from application.services import build_duo_summary
from domain.enums import Region, Role
from infrastructure.repositories import parse_match, parse_matches


class TestParseMatch:
    def test_basic_fields(self, make_match, make_participant):
        raw = make_match("EUW1_1", [make_participant("a", kp=0.6, dmg=0.31)], queue_id=440, duration=1500)

        match = parse_match(raw)

        assert match.match_id == "EUW1_1"
        assert match.queue_id == 440
        assert match.is_ranked
        assert match.game_duration_minutes == 25.0
        assert match.patch_version == "14.3"
        p = match.participant_for("a")
        assert p.kill_participation == 0.6
        assert p.team_damage_percentage == 0.31
        assert p.team_position is Role.MIDDLE

    def test_missing_challenges_stay_none(self, make_match, make_participant):
        match = parse_match(make_match("EUW1_1", [make_participant("a")]))

        p = match.participant_for("a")
        assert p.kill_participation is None
        assert p.team_damage_percentage is None

    def test_blank_position_and_missing_vision(self, make_match, make_participant):
        match = parse_match(make_match("EUW1_1", [make_participant("a", position="", vision=None)]))

        p = match.participant_for("a")
        assert p.team_position is Role.UNKNOWN
        assert p.vision_score == 0

    def test_display_name_falls_back_to_summoner_name(self, make_match, make_participant):
        participant = make_participant("a")
        del participant["riotIdGameName"]
        participant["summonerName"] = "OldName"

        match = parse_match(make_match("EUW1_1", [participant]))

        assert match.participant_for("a").display_name == "OldName"

    def test_teammates_exclude_self_and_enemies(self, make_match, make_participant):
        match = parse_match(make_match("EUW1_1", [
            make_participant("a", team_id=100),
            make_participant("b", team_id=100),
            make_participant("c", team_id=200),
        ]))

        assert [p.puuid for p in match.teammates_of("a")] == ["b"]
        assert match.teammates_of("zzz") == []

    def test_parse_matches_skips_malformed(self, make_match, make_participant):
        matches = parse_matches([make_match("EUW1_1", [make_participant("a")]), {"status": 404}, None])

        assert [m.match_id for m in matches] == ["EUW1_1"]

    def test_explicit_nulls_fall_back_to_defaults(self, make_match, make_participant):
        participant = make_participant("a")
        participant.update(kills=None, deaths=None, assists=None, championName=None, teamId=None)
        raw = make_match("EUW1_1", [participant])
        raw["info"].update(gameVersion=None, gameEndTimestamp=None)

        match = parse_match(raw)

        p = match.participant_for("a")
        assert (p.kills, p.deaths, p.assists) == (0, 0, 0)
        assert p.champion_name == ""
        assert p.team_id == 0
        assert match.game_version == ""
        assert match.game_end_timestamp == match.game_creation + match.game_duration * 1000

    def test_null_stats_aggregate(self, make_match, make_participant):
        mate = make_participant("b")
        mate.update(kills=None, championName=None)
        matches = parse_matches([make_match("EUW1_1", [make_participant("a"), mate])])

        duo = build_duo_summary(matches, "a", "b", Region.EUW1, generated_at=1)

        assert duo.sample_size == 1
        assert duo.champion_pairs_top[0].pair == ("", "Ahri")
