"""The git-switcher commands: create, delete, edit, listing, rename, root and switch."""