from .channel import Channel

SHARJAH_QURAN_LOGO = "https://i.imgur.com/Gkx79Bq.png"


def custom_channels():
    """Hand-picked streams missing from the public feeds"""
    return [
        Channel(
            "https://ythls.armelin.one/channel/UCn8lMRYDANs_1yAL3iuw7_g.m3u8",
            name="Sharjah Quran TV",
            logo=SHARJAH_QURAN_LOGO,
            group="Religious",
            tvg_id="SharjahQuran.ae",
            is_arab=True,
            country='ae',
            category_id='religious',
        ),
        Channel(
            "https://linkastream.co/headless?url=https://youtube.com/channel/UCn8lMRYDANs_1yAL3iuw7_g/live",
            name="Sharjah Quran TV Backup",
            logo=SHARJAH_QURAN_LOGO,
            group="Religious",
            tvg_id="SharjahQuran.ae",
            is_arab=True,
            country='ae',
            category_id='religious',
        ),
    ]
