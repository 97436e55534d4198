"""Initial assets written by ``AssetRegistry.init_ledger``."""

from ..models import Asset

SEED_ASSETS: tuple[Asset, ...] = (
    Asset(id="asset1", color="blue", size=5, owner="Tomoko", appraised_value=300),
    Asset(id="asset2", color="red", size=5, owner="Brad", appraised_value=400),
    Asset(id="asset3", color="green", size=10, owner="Jin Soo", appraised_value=500),
    Asset(id="asset4", color="yellow", size=10, owner="Max", appraised_value=600),
    Asset(id="asset5", color="black", size=15, owner="Adriana", appraised_value=700),
    Asset(id="asset6", color="white", size=15, owner="Michel", appraised_value=800),
)
