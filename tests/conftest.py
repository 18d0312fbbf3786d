import pytest


# Lines as captured from DXSpider, AR-Cluster and CC-Cluster nodes
CLUSTER_LINES = [
    "DX de DJ1TO:      3780.0  OH5Z         LSB                            2200Z JO62",
    "DX de N2CQ:      14036.1  W0BH         OK QSO Party: Major            1624Z",
    "DX de ZS6WN:     21075.4  CX2DAJ       FT8                            1625Z",
    "DX de OZ1FJB:     3527.6  DL2ASG                                      1815Z JO55",
    "WWV de VE7CC <21>:   SFI=70, A=12, K=3, No Storms -> No Storms",
    "WWV de VE7CC <15Z> :   SFI=68, A=9, K=2, No Storms -> Minor w/G1",
    "WCY de DK0WCY-1 <22> : K=4 expK=2 A=14 R=0 SFI=68 SA=qui GMF=act Au=no",
    "WX de VA3SAE: va3sub",
    "WX de LA3WAA <1001Z> :  The command WX will send a local weather announcement.  (WX Sunny and Warm)",
    "To ALL de EA8CEN-9: carnaval de tenerife ea8urt",
    "To ALL de CT2IDL <1044Z> : TNX qso..",
    "To Local de N5UXT <1405Z> : rebooting",
    "To LOCAL de IW5CLM: off",
]


@pytest.fixture(params=CLUSTER_LINES)
def cluster_line(request) -> str:
    return request.param


@pytest.fixture
def feed_lines() -> list:
    return [
        "DX de DF2MX:     18160.0  DL8AW/P      EU-156 Tombelaine Isl.         2259Z RF80\x07\r\n",
        "\r\n",
        "Welcome to the DXSpider cluster\r\n",
        "DX de DF2MX\r\n",
        "DX de EA5WU-#:   14025.0  OH2BH        CW    12 dB  25 WPM  CQ      1200Z\r\n",
    ]
