"""Known CI vendors and how to recognize them from the environment."""

from million_telemetry.ci.predicates import (
    AllKeys,
    AnyKey,
    EnvFlag,
    EnvNotEqual,
    KeyContains,
    KeyEquals,
    SingleKey,
    VendorRule,
)

VENDORS: tuple[VendorRule, ...] = (
    VendorRule(
        name="Agola CI",
        constant="AGOLA",
        env=SingleKey(name="AGOLA_GIT_REF"),
        pr=EnvFlag(name="AGOLA_PULL_REQUEST_ID"),
    ),
    VendorRule(name="Appcircle", constant="APPCIRCLE", env=SingleKey(name="AC_APPCIRCLE")),
    VendorRule(
        name="AppVeyor",
        constant="APPVEYOR",
        env=SingleKey(name="APPVEYOR"),
        pr=EnvFlag(name="APPVEYOR_PULL_REQUEST_NUMBER"),
    ),
    VendorRule(
        name="AWS CodeBuild", constant="CODEBUILD", env=SingleKey(name="CODEBUILD_BUILD_ARN")
    ),
    VendorRule(
        name="Azure Pipelines",
        constant="AZURE_PIPELINES",
        env=SingleKey(name="TF_BUILD"),
        pr=KeyEquals(mapping={"BUILD_REASON": "PullRequest"}),
    ),
    VendorRule(name="Bamboo", constant="BAMBOO", env=SingleKey(name="bamboo_planKey")),
    VendorRule(
        name="Bitbucket Pipelines",
        constant="BITBUCKET",
        env=SingleKey(name="BITBUCKET_COMMIT"),
        pr=EnvFlag(name="BITBUCKET_PR_ID"),
    ),
    VendorRule(
        name="Bitrise",
        constant="BITRISE",
        env=SingleKey(name="BITRISE_IO"),
        pr=EnvFlag(name="BITRISE_PULL_REQUEST"),
    ),
    VendorRule(
        name="Buddy",
        constant="BUDDY",
        env=SingleKey(name="BUDDY_WORKSPACE_ID"),
        pr=EnvFlag(name="BUDDY_EXECUTION_PULL_REQUEST_ID"),
    ),
    VendorRule(
        name="Buildkite",
        constant="BUILDKITE",
        env=SingleKey(name="BUILDKITE"),
        pr=EnvNotEqual(name="BUILDKITE_PULL_REQUEST", excluded="false"),
    ),
    VendorRule(
        name="CircleCI",
        constant="CIRCLE",
        env=SingleKey(name="CIRCLECI"),
        pr=EnvFlag(name="CIRCLE_PULL_REQUEST"),
    ),
    VendorRule(
        name="Cirrus CI",
        constant="CIRRUS",
        env=SingleKey(name="CIRRUS_CI"),
        pr=EnvFlag(name="CIRRUS_PR"),
    ),
    VendorRule(
        name="Codefresh",
        constant="CODEFRESH",
        env=SingleKey(name="CF_BUILD_ID"),
        pr=AnyKey(names=("CF_PULL_REQUEST_NUMBER", "CF_PULL_REQUEST_ID")),
    ),
    VendorRule(
        name="Codemagic",
        constant="CODEMAGIC",
        env=SingleKey(name="CM_BUILD_ID"),
        pr=EnvFlag(name="CM_PULL_REQUEST"),
    ),
    VendorRule(
        name="Codeship", constant="CODESHIP", env=KeyEquals(mapping={"CI_NAME": "codeship"})
    ),
    VendorRule(
        name="Drone",
        constant="DRONE",
        env=SingleKey(name="DRONE"),
        pr=KeyEquals(mapping={"DRONE_BUILD_EVENT": "pull_request"}),
    ),
    VendorRule(name="dsari", constant="DSARI", env=SingleKey(name="DSARI")),
    VendorRule(name="Earthly", constant="EARTHLY", env=SingleKey(name="EARTHLY_CI")),
    VendorRule(name="Expo Application Services", constant="EAS", env=SingleKey(name="EAS_BUILD")),
    VendorRule(name="Gerrit", constant="GERRIT", env=SingleKey(name="GERRIT_PROJECT")),
    VendorRule(name="Gitea Actions", constant="GITEA_ACTIONS", env=SingleKey(name="GITEA_ACTIONS")),
    VendorRule(
        name="GitHub Actions",
        constant="GITHUB_ACTIONS",
        env=SingleKey(name="GITHUB_ACTIONS"),
        pr=KeyEquals(mapping={"GITHUB_EVENT_NAME": "pull_request"}),
    ),
    VendorRule(
        name="GitLab CI",
        constant="GITLAB",
        env=SingleKey(name="GITLAB_CI"),
        pr=EnvFlag(name="CI_MERGE_REQUEST_ID"),
    ),
    VendorRule(name="GoCD", constant="GOCD", env=SingleKey(name="GO_PIPELINE_LABEL")),
    VendorRule(
        name="Google Cloud Build", constant="GOOGLE_CLOUD_BUILD", env=SingleKey(name="BUILDER_OUTPUT")
    ),
    VendorRule(name="Harness CI", constant="HARNESS", env=SingleKey(name="HARNESS_BUILD_ID")),
    VendorRule(
        name="Heroku",
        constant="HEROKU",
        env=KeyContains(name="NODE", substring="/app/.heroku/node/bin/node"),
    ),
    VendorRule(name="Hudson", constant="HUDSON", env=SingleKey(name="HUDSON_URL")),
    VendorRule(
        name="Jenkins",
        constant="JENKINS",
        env=AllKeys(names=("JENKINS_URL", "BUILD_ID")),
        pr=AnyKey(names=("ghprbPullId", "CHANGE_ID")),
    ),
    VendorRule(
        name="LayerCI",
        constant="LAYERCI",
        env=SingleKey(name="LAYERCI"),
        pr=EnvFlag(name="LAYERCI_PULL_REQUEST"),
    ),
    VendorRule(name="Magnum CI", constant="MAGNUM", env=SingleKey(name="MAGNUM")),
    VendorRule(
        name="Netlify CI",
        constant="NETLIFY",
        env=SingleKey(name="NETLIFY"),
        pr=EnvNotEqual(name="PULL_REQUEST", excluded="false"),
    ),
    VendorRule(
        name="Nevercode",
        constant="NEVERCODE",
        env=SingleKey(name="NEVERCODE"),
        pr=EnvNotEqual(name="NEVERCODE_PULL_REQUEST", excluded="false"),
    ),
    VendorRule(name="Prow", constant="PROW", env=SingleKey(name="PROW_JOB_ID")),
    VendorRule(name="ReleaseHub", constant="RELEASEHUB", env=SingleKey(name="RELEASE_BUILD_ID")),
    VendorRule(
        name="Render",
        constant="RENDER",
        env=SingleKey(name="RENDER"),
        pr=KeyEquals(mapping={"IS_PULL_REQUEST": "true"}),
    ),
    VendorRule(
        name="Sail CI",
        constant="SAIL",
        env=SingleKey(name="SAILCI"),
        pr=EnvFlag(name="SAIL_PULL_REQUEST_NUMBER"),
    ),
    VendorRule(
        name="Screwdriver",
        constant="SCREWDRIVER",
        env=SingleKey(name="SCREWDRIVER"),
        pr=EnvNotEqual(name="SD_PULL_REQUEST", excluded="false"),
    ),
    VendorRule(
        name="Semaphore",
        constant="SEMAPHORE",
        env=SingleKey(name="SEMAPHORE"),
        pr=EnvFlag(name="PULL_REQUEST_NUMBER"),
    ),
    VendorRule(
        name="Sourcehut", constant="SOURCEHUT", env=KeyEquals(mapping={"CI_NAME": "sourcehut"})
    ),
    VendorRule(name="Strider CD", constant="STRIDER", env=SingleKey(name="STRIDER")),
    VendorRule(name="TaskCluster", constant="TASKCLUSTER", env=AllKeys(names=("TASK_ID", "RUN_ID"))),
    VendorRule(name="TeamCity", constant="TEAMCITY", env=SingleKey(name="TEAMCITY_VERSION")),
    VendorRule(
        name="Travis CI",
        constant="TRAVIS",
        env=SingleKey(name="TRAVIS"),
        pr=EnvNotEqual(name="TRAVIS_PULL_REQUEST", excluded="false"),
    ),
    VendorRule(
        name="Vela",
        constant="VELA",
        env=SingleKey(name="VELA"),
        pr=KeyEquals(mapping={"VELA_PULL_REQUEST": "1"}),
    ),
    VendorRule(
        name="Vercel",
        constant="VERCEL",
        env=AnyKey(names=("NOW_BUILDER", "VERCEL")),
        pr=EnvFlag(name="VERCEL_GIT_PULL_REQUEST_ID"),
    ),
    VendorRule(
        name="Visual Studio App Center",
        constant="APPCENTER",
        env=SingleKey(name="APPCENTER_BUILD_ID"),
    ),
    VendorRule(
        name="Woodpecker",
        constant="WOODPECKER",
        env=KeyEquals(mapping={"CI": "woodpecker"}),
        pr=KeyEquals(mapping={"CI_BUILD_EVENT": "pull_request"}),
    ),
    VendorRule(
        name="Xcode Cloud",
        constant="XCODE_CLOUD",
        env=SingleKey(name="CI_XCODE_PROJECT"),
        pr=EnvFlag(name="CI_PULL_REQUEST_NUMBER"),
    ),
    VendorRule(name="Xcode Server", constant="XCODE_SERVER", env=SingleKey(name="XCS")),
)
