"""Configure kubectl to use AWS Elastic Kubernetes Service."""

from typing import List, Optional

from ..core import AppError, Context, aws, error_context, select


def get_clusters(context: Context) -> List[str]:
    """List the EKS clusters available to the active profile."""
    with error_context(
        "The list of available EKS clusters could not be retrieved from the AWS CLI."
    ):
        output = (
            aws(context)
            .arg("eks")
            .arg("list-clusters")
            .arg("--query")
            .arg("clusters")
            .arg("--output")
            .arg("text")
            .output()
        )
    return output.split()


def execute(context: Context, cluster: Optional[str] = None) -> None:
    clusters = get_clusters(context)

    if cluster is not None:
        if cluster not in clusters:
            raise AppError(1, "The specified cluster is not available.")
    else:
        with error_context("Unable to select an EKS cluster."):
            cluster = select("Please select an EKS cluster to setup:", clusters)

    with error_context("Could not get the AWS CLI to configure kubectl."):
        (
            aws(context)
            .arg("eks")
            .arg("update-kubeconfig")
            .arg("--name")
            .arg(cluster)
            .pass_through(context)
        )
