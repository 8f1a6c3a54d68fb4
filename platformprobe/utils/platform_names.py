from ..host.kotlin import KotlinPlatformType


def get_platform_name(platform_type) -> str:
    """Canonical display name of a platform type; Android JVM targets report as plain jvm."""
    if platform_type == KotlinPlatformType.ANDROID_JVM or platform_type == KotlinPlatformType.ANDROID_JVM.value:
        return str(KotlinPlatformType.JVM)
    return str(platform_type)
