from .resolver import PlatformData, PlatformResolver
