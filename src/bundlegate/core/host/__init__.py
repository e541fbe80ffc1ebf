from bundlegate.core.host.abc import Host
from bundlegate.core.host.fake import FakeHost
from bundlegate.core.host.real import RealHost

__all__ = ["FakeHost", "Host", "RealHost"]
