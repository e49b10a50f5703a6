import importlib.metadata
import os.path
import subprocess


def get_git_version(package_dir):
    """Get version information from git."""
    try:

        def git_cmd(cmd):
            return subprocess.check_output(cmd, cwd=package_dir, text=True).strip()

        if (
            subprocess.call(
                ["git", "rev-parse", "--is-inside-work-tree"],
                cwd=package_dir,
                stdout=subprocess.DEVNULL,
                stderr=subprocess.DEVNULL,
            )
            == 0
        ):
            tags = git_cmd(["git", "tag", "--list", "v*", "--sort=-v:refname"])
            if tags:
                version = tags.split("\n")[0].lstrip("v")
                commit_hash = git_cmd(["git", "rev-parse", "--short", "HEAD"])
                version += f"+{commit_hash}"
                if git_cmd(["git", "status", "--porcelain"]):
                    version += ".dirty"
                return version
    except (subprocess.CalledProcessError, FileNotFoundError):
        pass
    return None


try:
    __version__ = importlib.metadata.version("ctxpick")

    # editable installs report the tag they were built from, prefer git
    if isinstance(
        importlib.metadata.distribution("ctxpick"),
        importlib.metadata.PathDistribution,
    ):
        package_dir = os.path.dirname(os.path.abspath(__file__))
        if git_version := get_git_version(package_dir):
            __version__ = git_version

except importlib.metadata.PackageNotFoundError:
    __version__ = "0.0.0 (unknown)"

if __name__ == "__main__":
    print(__version__)
