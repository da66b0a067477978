from types import MappingProxyType

CURRENCY = "USD"

# Static quotes served in mock mode
MOCK_PRICES = MappingProxyType({
    "AAPL": 150.00,
    "BTC": 30000.00,
    "ETH": 2000.00,
})

# Ticker -> CoinGecko coin id. Insertion order is the order shown to clients.
COINGECKO_IDS = MappingProxyType({
    "BTC": "bitcoin",
    "ETH": "ethereum",
    "BNB": "binancecoin",
    "SOL": "solana",
    "XRP": "ripple",
    "ADA": "cardano",
    "DOGE": "dogecoin",
    "DOT": "polkadot",
    "AVAX": "avalanche-2",
    "LINK": "chainlink",
})
