"""
Entry point for the MEV Academy API.

Usage:
    python -m mev_academy
    mev-academy  # if installed via pip
"""

import sys

import uvicorn


# uvloop is not available on Windows
try:
    import uvloop  # noqa: F401

    UVLOOP_AVAILABLE = True
except ImportError:
    UVLOOP_AVAILABLE = False


def event_loop(use_uvloop: bool) -> str:
    """uvicorn loop implementation, falling back to asyncio without uvloop."""
    return "uvloop" if use_uvloop and UVLOOP_AVAILABLE else "asyncio"


def main() -> int:
    """
    Main entry point.

    Returns:
        Exit code (0 for success).
    """
    from mev_academy import __version__
    from mev_academy.config.settings import get_settings

    # Print banner
    print(
        f"""
╔═══════════════════════════════════════════════════════════════╗
║     MEV ACADEMY API v{__version__:<35}      ║
║                                                               ║
║     MEV education backend for Ethereum                        ║
╚═══════════════════════════════════════════════════════════════╝
    """
    )

    # Load settings
    try:
        settings = get_settings()
    except Exception as e:
        print(f"Configuration error: {e}")
        print("\nCheck your .env file, for example:")
        print("  ETHERSCAN_API_KEY=your_api_key")
        print("  FRONTEND_URL=http://localhost:3000")
        return 1

    # Print configuration summary
    print("Configuration:")
    print(f"  Environment:    {settings.environment}")
    print(f"  Listen:         {settings.host}:{settings.port}")
    print(f"  Explorer:       {settings.explorer_base_url} (chain {settings.explorer_chain_id})")
    print(f"  Explorer key:   {'Set' if settings.explorer_api_key else 'Missing (mock data only)'}")
    print(f"  CORS origin:    {settings.frontend_url}")
    window = settings.rate_limit_window_seconds
    print(f"  Rate limit:     {settings.rate_limit_requests} per {window:g}s")
    print(f"  Event loop:     {event_loop(settings.use_uvloop)}")
    print()

    try:
        uvicorn.run(
            "mev_academy.api.server:create_app",
            factory=True,
            host=settings.host,
            port=settings.port,
            loop=event_loop(settings.use_uvloop),
            log_level=settings.log_level.lower(),
        )
    except KeyboardInterrupt:
        print("\nInterrupted by user")
    return 0


if __name__ == "__main__":
    sys.exit(main())
