from iptv_arab.channel import Channel
from iptv_arab.filtering import (
    SOURCE_CATEGORY,
    SOURCE_COUNTRY,
    SOURCE_LANGUAGE,
    ChannelIndex,
    accept_channel,
    merge_channel,
)


def make(name="Channel", tvg_id="", group="", url="https://streams.test/a", **tags):
    return Channel(url, name=name, group=group, tvg_id=tvg_id, **tags)


class TestPolicy:

    def test_plain_channel_accepted(self):
        assert accept_channel(make("Al Arabiya", "AlArabiya.ae"), SOURCE_COUNTRY)

    def test_blocked_region_rejected_regardless(self):
        ch = make("MBC 1", "IRTV.ir", group="General", country='sa', is_arab=True)

        assert not accept_channel(ch, SOURCE_COUNTRY)
        assert not accept_channel(ch, SOURCE_LANGUAGE)
        assert not accept_channel(ch, SOURCE_CATEGORY)

    def test_blocked_region_uses_lowercased_id(self):
        assert not accept_channel(make("X", "Press.IR"), SOURCE_LANGUAGE)

    def test_exclusion_keywords_are_case_sensitive(self):
        assert not accept_channel(make("Rotana Cinema", "RotanaCinema.sa"), SOURCE_COUNTRY)
        assert not accept_channel(make("Mix", group="Radio"), SOURCE_COUNTRY)
        assert accept_channel(make("Qatar test Channel"), SOURCE_COUNTRY)

    def test_radio_group_rejected_in_any_case(self):
        assert not accept_channel(make("Mix", group="radio"), SOURCE_COUNTRY)

    def test_blocked_name_keywords(self):
        assert not accept_channel(make("Al Alam News"), SOURCE_LANGUAGE)

    def test_iraqia_news_kept_drama_dropped(self):
        assert accept_channel(make("Al Iraqia News", "AlIraqiaNews.iq"), SOURCE_COUNTRY)
        assert not accept_channel(make("Al Iraqia Drama", "AlIraqiaDrama.iq"), SOURCE_COUNTRY)

    def test_category_gate(self):
        assert accept_channel(make("CNN", "CNN.us"), SOURCE_CATEGORY)
        assert accept_channel(make("BBC One", "BBCOne.uk"), SOURCE_CATEGORY)
        assert accept_channel(make("CBC News", "CBCNews.ca"), SOURCE_CATEGORY)
        assert accept_channel(make("Al Arabiya", "AlArabiya.ae"), SOURCE_CATEGORY)
        assert not accept_channel(make("Euronews", "Euronews.eu"), SOURCE_CATEGORY)
        assert not accept_channel(make("No Id"), SOURCE_CATEGORY)

    def test_gate_only_for_category_sources(self):
        assert accept_channel(make("Euronews", "Euronews.eu"), SOURCE_LANGUAGE)

    def test_force_include_passes_gate(self):
        assert accept_channel(make("Spacetoon", "Spacetoon.xx"), SOURCE_CATEGORY)

    def test_force_include_ignores_case(self):
        assert accept_channel(make("mbc max", "MbcMax.xx"), SOURCE_CATEGORY)

    def test_force_include_does_not_override_exclusions(self):
        assert not accept_channel(make("Rotana Comedy", "RotanaComedy.sa"), SOURCE_CATEGORY)


class TestMerge:

    def test_insert_when_new(self):
        ch = make()
        assert merge_channel(None, ch) is ch

    def test_first_source_keeps_base_fields(self):
        first = make("First", group="General", url="https://streams.test/x")
        first.logo = "https://logo.test/1.png"
        second = make("Second", group="News", url="https://streams.test/x")
        second.logo = "https://logo.test/2.png"

        merged = merge_channel(first, second)

        assert merged is first
        assert (merged.name, merged.logo, merged.group) == ("First", "https://logo.test/1.png", "General")

    def test_tags_are_added_never_cleared(self):
        first = make(country='sa', is_arab=True)
        second = make(category_id='news')

        merged = merge_channel(first, second)

        assert merged.country == 'sa'
        assert merged.category_id == 'news'
        assert merged.is_arab

    def test_tags_do_not_overwrite(self):
        merged = merge_channel(make(country='sa', category_id='news'), make(country='ae', category_id='kids'))

        assert (merged.country, merged.category_id) == ('sa', 'news')

    def test_tag_enrichment_is_order_independent(self):
        ab = merge_channel(make(country='sa'), make(category_id='sports', is_arab=True))
        ba = merge_channel(make(category_id='sports', is_arab=True), make(country='sa'))

        assert (ab.country, ab.category_id, ab.is_arab) == (ba.country, ba.category_id, ba.is_arab)


class TestChannelIndex:

    def test_one_record_per_url(self):
        index = ChannelIndex()
        index.extend([
            make("A", url="https://streams.test/1"),
            make("B", url="https://streams.test/2"),
            make("A again", url="https://streams.test/1", country='sa'),
        ])

        assert len(index) == 2
        assert index.duplicates == 1
        assert [ch.name for ch in index] == ["A", "B"]
        assert [ch.country for ch in index] == ['sa', None]
