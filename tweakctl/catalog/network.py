from macos_tweaks.core.catalog import Action, Category


def get_category() -> Category:
    return Category(
        name="Networking",
        description="Configure network settings",
        actions=[
            Action("Flush DNS Cache", "Removes all entries from the DNS cache",
                   "sudo dscacheutil -flushcache; sudo killall -HUP mDNSResponder"),
            Action("Wi-Fi", "Inspect wireless networking"),
            Action("  Show Wi-Fi Network", "Show the network the Wi-Fi interface is joined to",
                   "networksetup -getairportnetwork en0"),
            Action("  List Network Services", "List all configured network services",
                   "networksetup -listallnetworkservices"),
        ],
    )
