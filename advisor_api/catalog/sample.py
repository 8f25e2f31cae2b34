"""Built-in demo instrument catalog.

Prices and changes are illustrative snapshots, not market data.
Order matters: allocation picks the first instruments of each tier.
"""

SAMPLE_INSTRUMENTS: list[dict] = [
    {
        "id": "tesouro-selic",
        "name": "Tesouro Selic 2029",
        "kind": "fixed-income",
        "current_price": 14520.35,
        "change_24h": 5.12,
        "change_percent": 0.04,
        "risk_tier": "low",
        "recommendation": "buy",
    },
    {
        "id": "cdb-liquidez",
        "name": "CDB Liquidez Diaria",
        "kind": "fixed-income",
        "current_price": 1000.00,
        "change_24h": 0.38,
        "change_percent": 0.04,
        "risk_tier": "low",
        "recommendation": "hold",
    },
    {
        "id": "ipca-2035",
        "name": "Tesouro IPCA+ 2035",
        "kind": "fixed-income",
        "current_price": 2210.80,
        "change_24h": -4.41,
        "change_percent": -0.20,
        "risk_tier": "medium",
        "recommendation": "buy",
    },
    {
        "id": "itub4",
        "name": "Itau Unibanco PN",
        "kind": "equity",
        "current_price": 33.45,
        "change_24h": 0.42,
        "change_percent": 1.27,
        "risk_tier": "medium",
        "recommendation": "buy",
    },
    {
        "id": "petr4",
        "name": "Petrobras PN",
        "kind": "equity",
        "current_price": 38.72,
        "change_24h": -0.61,
        "change_percent": -1.55,
        "risk_tier": "medium",
        "recommendation": "hold",
    },
    {
        "id": "mglu3",
        "name": "Magazine Luiza ON",
        "kind": "equity",
        "current_price": 10.15,
        "change_24h": -0.48,
        "change_percent": -4.52,
        "risk_tier": "high",
        "recommendation": "sell",
    },
    {
        "id": "btc",
        "name": "Bitcoin",
        "kind": "digital-asset",
        "current_price": 342150.00,
        "change_24h": 8210.40,
        "change_percent": 2.46,
        "risk_tier": "high",
        "recommendation": "buy",
    },
    {
        "id": "eth",
        "name": "Ethereum",
        "kind": "digital-asset",
        "current_price": 17830.25,
        "change_24h": 612.90,
        "change_percent": 3.56,
        "risk_tier": "high",
        "recommendation": "hold",
    },
    {
        "id": "bova11",
        "name": "iShares Ibovespa ETF",
        "kind": "fund",
        "current_price": 124.60,
        "change_24h": 0.87,
        "change_percent": 0.70,
        "risk_tier": "medium",
        "recommendation": "buy",
    },
    {
        "id": "xpml11",
        "name": "XP Malls FII",
        "kind": "fund",
        "current_price": 108.90,
        "change_24h": 0.22,
        "change_percent": 0.20,
        "risk_tier": "low",
        "recommendation": "hold",
    },
    {
        "id": "hash11",
        "name": "Hashdex Nasdaq Crypto Index",
        "kind": "fund",
        "current_price": 52.30,
        "change_24h": 1.95,
        "change_percent": 3.87,
        "risk_tier": "high",
        "recommendation": "buy",
    },
]
