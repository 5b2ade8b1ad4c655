"""
L0 Data — Configuration file templates.

Written verbatim, except for ``{weather_city}`` and ``{weather_unit}``
in the tmux weather block.  Shell variables (``${WEATHER_CITY}``) and
tmux formats (``#{...}``) are part of the generated file and are left
untouched by rendering.
"""

from __future__ import annotations


INIT_LUA = r'''local lazypath = vim.fn.stdpath("data") .. "/lazy/lazy.nvim"
if not vim.loop.fs_stat(lazypath) then
  vim.fn.system({
    "git",
    "clone",
    "--depth",
    "1",
    "https://github.com/folke/lazy.nvim.git",
    lazypath,
  })
end
vim.opt.rtp:prepend(lazypath)

require("lazy").setup({
  "neovim/nvim-lspconfig",
  "williamboman/mason.nvim",
  "williamboman/mason-lspconfig.nvim",
  "hrsh7th/nvim-cmp",
  "saadparwaiz1/cmp_nvim_lsp",
  "L3MON4D3/LuaSnip",
  "saadparwaiz1/cmp-luasnip",
  "hrsh7th/cmp-buffer",
  "hrsh7th/cmp-path",
  "hrsh7th/cmp-cmdline",
  "jose-elias-alvarez/null-ls.nvim",
  "nvim-lua/popup.nvim",
  "nvim-lua/plenary.nvim",
  "nvim-telescope/telescope.nvim",
  "nvim-tree/nvim-tree.lua",
  "lewis6991/gitsigns.nvim",
  "folke/tokyonight.nvim",
  "nvim-treesitter/nvim-treesitter",
  { "nvim-treesitter/nvim-treesitter-textobjects", after = "nvim-treesitter" },
})

vim.cmd.colorscheme "tokyonight-night"

local lspconfig = require("lspconfig")
local cmp = require('cmp')
local luasnip = require("luasnip")
local null_ls = require("null-ls")

require("mason").setup()
require("mason-lspconfig").setup({
  ensure_installed = { "typescript-language-server", "eslint_d", "prettierd" },
})

lspconfig.tsserver.setup {
  capabilities = require('cmp_nvim_lsp').default_capabilities(),
}

cmp.setup({
  snippet = {
    expand = function(args)
      luasnip.lsp_expand(args.body)
    end,
  },
  mapping = cmp.mapping.preset.insert({
    ['<C-Space>'] = cmp.mapping.complete(),
    ['<C-e>'] = cmp.mapping.abort(),
    ['<CR>'] = cmp.mapping.confirm({ select = false }),
  }),
  sources = {
    { name = 'nvim_lsp' },
    { name = 'luasnip' },
    { name = 'buffer' },
    { name = 'path' },
    { name = 'cmdline' },
  },
})

null_ls.setup({
  sources = {
    null_ls.builtins.formatting.prettierd,
    null_ls.builtins.diagnostics.eslint_d,
  },
})

require('telescope').setup{
  defaults = {
    mappings = {
      i = {
        ['<C-u>'] = false,
        ['<C-d>'] = false,
      },
    },
  },
}

vim.keymap.set('n', '<leader>ff', '<cmd>Telescope find_files<cr>', { desc = 'Find files' })
vim.keymap.set('n', '<leader>fg', '<cmd>Telescope live_grep<cr>', { desc = 'Live grep' })
vim.keymap.set('n', '<leader>fb', '<cmd>Telescope buffers<cr>', { desc = 'Find buffers' })
vim.keymap.set('n', '<leader>fh', '<cmd>Telescope help_tags<cr>', { desc = 'Find help' })
require("nvim-tree").setup({
  sort_by = "case_sensitive",
  view = {
    adaptive_size = true,
    mappings = {
      list = {
        { key = "u", action = "dir_up" },
      },
    },
  },
  renderer = {
    group_empty = true,
  },
  filters = {
    dotfiles = false,
  },
})
vim.keymap.set('n', '<leader>e', '<cmd>NvimTreeToggle<cr>', { desc = 'Toggle file explorer' })
require('gitsigns').setup()
require('nvim-treesitter.configs').setup({
  ensure_installed = { 'javascript', 'typescript', 'tsx', 'json', 'html', 'css' },
  highlight = { enable = true },
  indent = { enable = true },
  textobjects = {
    select = { enable = true, lookahead = true, keymaps = { ia = 'a', ii = 'i', aa = 'A', ai = 'I' } },
    move = { enable = true, set_jumps = true, goto_next_start = { ['}'] = '}', [']]'] = ']]' }, goto_next_end = { ['}'] = '}', [']]'] = ']]' }, goto_previous_start = { ['{'] = '{', ['[['] = '[[' }, goto_previous_end = { ['{'] = '{', ['[['] = '[[', } },
    swap = { enable = true, swap_next = { ['>a'] = '>a', ['>i'] = '>i' }, swap_previous = { ['<a'] = '<a', ['<i'] = '<i' } },
  },
})
vim.g.mapleader = " "
vim.g.maplocalleader = " "
'''


TMUX_BASE = r'''# Change prefix key to Ctrl+a
unbind C-b
set-option -g prefix C-a
bind-key C-a send-prefix

# Set easier window and pane split keys
unbind %
bind | split-window -h
unbind '"'
bind - split-window -v

# Enable mouse mode
setw -g mode-keys vi
setw -g mouse on

# Set default terminal to 256-color xterm
set -g default-terminal "xterm-256color"
set -ag terminal-overrides ",xterm-256color:RGB" # For true color in tmux

# Status bar customization (simple)
set -g status-bg colour235
set -g status-fg colour136
set -g window-status-current-style fg=colour166,bg=colour238,bold
'''


TMUX_WEATHER_BLOCK = r'''# --- Weather Information in Status Bar ---
# --- Customize CITY_NAME below ---
WEATHER_CITY="{weather_city}"  # Change this to your city name (e.g., "New York", "Paris")
WEATHER_UNIT="{weather_unit}" # "metric" for Celsius, "imperial" for Fahrenheit

WEATHER_CMD="curl -s \"http://api.openweathermap.org/data/2.5/weather?q=${WEATHER_CITY}&units=${WEATHER_UNIT}&appid=YOUR_API_KEY_HERE\" 2>/dev/null | jq -r '.main.temp, .weather[0].main'"
# IMPORTANT: Replace "YOUR_API_KEY_HERE" in the WEATHER_CMD with your actual API key from OpenWeatherMap if you want to use their service reliably.
# For this example, using city name directly might work for testing but is not recommended for production due to potential rate limits.

set -g status-right "#{?#{pane_in_mode},#{pane_mode}, } %Y-%m-%d %H:%M  #{WEATHER_CITY}: #{shellcommand \"echo $(printf '%.1f°C %s' $(head -n 1 <<<\"${WEATHER_CMD}\") $(tail -n 1 <<<\"${WEATHER_CMD}\"))\"}"
'''

# Marker lines around the managed weather block in ~/.tmux.conf
WEATHER_BLOCK_BEGIN = "# >>> devsetup weather >>>"
WEATHER_BLOCK_END = "# <<< devsetup weather <<<"
