"""Dependency injection container."""

from dishka import AsyncContainer, make_async_container

from reputation.util.di import PROVIDERS, get_provider


def create_container() -> AsyncContainer:
    """Build production container (all prod implementations).

    Settings are loaded from environment variables automatically. Open a
    request scope per unit of work; it commits on success:

        container = create_container()
        async with container() as request_container:
            use_case = await request_container.get(CastVoteUseCase)
            await use_case.execute(request)
        await container.close()

    Returns:
        Configured DI container with production providers
    """
    provider_instances = [get_provider(base, use_mock=False)() for base in PROVIDERS]
    return make_async_container(*provider_instances)
