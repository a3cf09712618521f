from app.services.filter_engine import ALL, FilterState, filter_spots, matches


def _spots(spot_factory):
    return [
        spot_factory("1", "Bar do Mineiro", category="Bares", neighborhood="Santa Teresa", description="Feijoada histórica"),
        spot_factory("2", "Aprazível", category="Restaurantes", neighborhood="Santa Teresa", description="Vista da baía"),
        spot_factory("3", "Mureta da Urca", category="Passeios", neighborhood="Urca", description="Pôr do sol"),
    ]


def test_identity_filters_keep_everything_in_order(spot_factory):
    spots = _spots(spot_factory)
    assert filter_spots(spots) == spots
    assert filter_spots(spots, ALL, ALL, "") == spots


def test_category_and_neighborhood_combine(spot_factory):
    spots = _spots(spot_factory)
    result = filter_spots(spots, category="Bares", neighborhood="Santa Teresa")
    assert [s.id for s in result] == ["1"]
    assert filter_spots(spots, category="Bares", neighborhood="Urca") == []


def test_query_is_case_insensitive_over_name_and_description(spot_factory):
    spots = _spots(spot_factory)
    assert [s.id for s in filter_spots(spots, query="MUR")] == ["3"]
    assert [s.id for s in filter_spots(spots, query="baía")] == ["2"]
    assert [s.id for s in filter_spots(spots, query="santa")] == []


def test_matches_single_spot(spot_factory):
    spot = spot_factory("9", "Canastra Bar", category="Bares", neighborhood="Ipanema")
    assert matches(spot, category="Bares", query="canastra")
    assert not matches(spot, neighborhood="Leblon")


def test_filter_state_active_and_reset(spot_factory):
    state = FilterState()
    assert not state.active

    state.query = "bar"
    assert not state.active

    state.neighborhood = "Urca"
    assert state.active
    assert [s.id for s in state.apply(_spots(spot_factory))] == []

    state.reset()
    assert state == FilterState()
