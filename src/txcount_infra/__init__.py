"""Infrastructure adapters: cache backends and the Solana RPC client."""
