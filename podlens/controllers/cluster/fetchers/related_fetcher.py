"""Related-resource fetcher - services, ingresses, config maps and secrets of a pod."""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any

from podlens.constants.timeouts import CLUSTER_REQUEST_TIMEOUT
from podlens.models.core import IngressInfo, PodInfo, RelatedResources, ServiceInfo

logger = logging.getLogger(__name__)


def labels_match(selector: dict[str, str], labels: dict[str, str]) -> bool:
    """True when every selector pair is present in ``labels``."""
    return all(labels.get(key) == value for key, value in selector.items())


def ingress_references_service(ingress: dict[str, Any], service_name: str) -> bool:
    for rule in ingress.get("spec", {}).get("rules") or []:
        for path in (rule.get("http") or {}).get("paths") or []:
            backend_service = (path.get("backend") or {}).get("service") or {}
            if backend_service.get("name") == service_name:
                return True
    return False


def _unique(values: list[str]) -> list[str]:
    return list(dict.fromkeys(value for value in values if value))


class RelatedFetcher:
    """Collects the resources the manifest panel lists under "Related"."""

    def __init__(self, run_kubectl_func: Any) -> None:
        """Initialize with kubectl runner function.

        Args:
            run_kubectl_func: Async function to run kubectl commands
        """
        self._run_kubectl = run_kubectl_func

    async def _items(self, resource: str, namespace: str) -> list[dict[str, Any]]:
        output = await self._run_kubectl(
            (
                "get",
                resource,
                "-n",
                namespace,
                "-o",
                "json",
                f"--request-timeout={CLUSTER_REQUEST_TIMEOUT}",
            )
        )
        return (json.loads(output) if output else {}).get("items", [])

    async def _pod_object(self, pod: PodInfo) -> dict[str, Any]:
        output = await self._run_kubectl(
            (
                "get",
                "pod",
                pod.name,
                "-n",
                pod.namespace,
                "-o",
                "json",
                f"--request-timeout={CLUSTER_REQUEST_TIMEOUT}",
            )
        )
        return json.loads(output) if output else {}

    @staticmethod
    def _endpoint_counts(endpoints: list[dict[str, Any]]) -> dict[str, int]:
        counts: dict[str, int] = {}
        for endpoint in endpoints:
            name = endpoint.get("metadata", {}).get("name", "")
            counts[name] = sum(
                len(subset.get("addresses") or [])
                for subset in endpoint.get("subsets") or []
            )
        return counts

    @staticmethod
    def _parse_service(service: dict[str, Any], endpoints: int) -> ServiceInfo:
        spec = service.get("spec", {})
        return ServiceInfo(
            name=service.get("metadata", {}).get("name", ""),
            type=spec.get("type") or "ClusterIP",
            cluster_ip=spec.get("clusterIP") or "",
            ports=[
                f"{port.get('port')}/{port.get('protocol', 'TCP')}"
                for port in spec.get("ports") or []
            ],
            endpoints=endpoints,
        )

    @staticmethod
    def _parse_ingress(ingress: dict[str, Any]) -> IngressInfo:
        hosts: list[str] = []
        paths: list[str] = []
        for rule in ingress.get("spec", {}).get("rules") or []:
            hosts.append(rule.get("host") or "*")
            for path in (rule.get("http") or {}).get("paths") or []:
                paths.append(path.get("path") or "/")
        return IngressInfo(
            name=ingress.get("metadata", {}).get("name", ""), hosts=hosts, paths=paths
        )

    @staticmethod
    def _config_refs(pod_object: dict[str, Any]) -> tuple[list[str], list[str]]:
        config_maps: list[str] = []
        secrets: list[str] = []
        spec = pod_object.get("spec", {})
        for volume in spec.get("volumes") or []:
            if "configMap" in volume:
                config_maps.append(volume["configMap"].get("name", ""))
            if "secret" in volume:
                secrets.append(volume["secret"].get("secretName", ""))
        for container in spec.get("containers") or []:
            for env_from in container.get("envFrom") or []:
                if "configMapRef" in env_from:
                    config_maps.append(env_from["configMapRef"].get("name", ""))
                if "secretRef" in env_from:
                    secrets.append(env_from["secretRef"].get("name", ""))
            for env in container.get("env") or []:
                value_from = env.get("valueFrom") or {}
                if "configMapKeyRef" in value_from:
                    config_maps.append(value_from["configMapKeyRef"].get("name", ""))
                if "secretKeyRef" in value_from:
                    secrets.append(value_from["secretKeyRef"].get("name", ""))
        return _unique(config_maps), _unique(secrets)

    async def fetch_related(self, pod: PodInfo) -> RelatedResources:
        """Collect related resources; each lookup that fails is left empty."""
        services, endpoints, ingresses, pod_object = await asyncio.gather(
            self._items("services", pod.namespace),
            self._items("endpoints", pod.namespace),
            self._items("ingresses", pod.namespace),
            self._pod_object(pod),
            return_exceptions=True,
        )
        for label, result in (
            ("services", services),
            ("endpoints", endpoints),
            ("ingresses", ingresses),
            ("pod", pod_object),
        ):
            if isinstance(result, BaseException):
                logger.debug("Related %s lookup failed for %s: %s", label, pod.name, result)

        related = RelatedResources()
        if pod.owner_name:
            related.owner = f"{pod.owner_kind}/{pod.owner_name}"

        if not isinstance(services, BaseException):
            counts = {} if isinstance(endpoints, BaseException) else self._endpoint_counts(endpoints)
            for service in services:
                selector = service.get("spec", {}).get("selector") or {}
                if selector and labels_match(selector, pod.labels):
                    name = service.get("metadata", {}).get("name", "")
                    related.services.append(self._parse_service(service, counts.get(name, 0)))

        if not isinstance(ingresses, BaseException):
            for ingress in ingresses:
                if any(
                    ingress_references_service(ingress, service.name)
                    for service in related.services
                ):
                    related.ingresses.append(self._parse_ingress(ingress))

        if not isinstance(pod_object, BaseException):
            related.config_maps, related.secrets = self._config_refs(pod_object)

        return related
